"""003: create jobs table

Revision ID: 003
Revises: 002
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE jobs (
            id            SERIAL      PRIMARY KEY,
            description   TEXT        NOT NULL,
            price         BIGINT      NOT NULL,
            paid          BOOLEAN     NOT NULL DEFAULT FALSE,
            payment_date  TIMESTAMPTZ,
            contract_id   INTEGER     REFERENCES contracts (id),
            created_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at    TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_jobs_price_gt_0 CHECK (price > 0),
            CONSTRAINT ck_jobs_paid_has_date CHECK (NOT paid OR payment_date IS NOT NULL)
        );
    """)
    op.execute("CREATE INDEX idx_jobs_unpaid ON jobs (contract_id) WHERE paid = FALSE;")
    op.execute("CREATE INDEX idx_jobs_paid_created ON jobs (created_at) WHERE paid = TRUE;")
    op.execute("""
        CREATE TRIGGER trg_jobs_updated_at
            BEFORE UPDATE ON jobs
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS jobs CASCADE;")
