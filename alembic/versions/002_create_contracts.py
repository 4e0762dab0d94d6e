"""002: create contracts table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE contracts (
            id             SERIAL      PRIMARY KEY,
            terms          TEXT        NOT NULL,
            status         VARCHAR(20) NOT NULL,
            client_id      INTEGER     REFERENCES profiles (id),
            contractor_id  INTEGER     REFERENCES profiles (id),
            created_at     TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at     TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_contracts_status CHECK (status IN ('new', 'in_progress', 'terminated'))
        );
    """)
    op.execute("CREATE INDEX idx_contracts_client ON contracts (client_id, status);")
    op.execute("CREATE INDEX idx_contracts_contractor ON contracts (contractor_id, status);")
    op.execute("""
        CREATE TRIGGER trg_contracts_updated_at
            BEFORE UPDATE ON contracts
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS contracts CASCADE;")
