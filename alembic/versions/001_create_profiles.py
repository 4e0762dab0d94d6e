"""001: create timestamp trigger function and profiles table

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE OR REPLACE FUNCTION fn_touch_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)
    op.execute("""
        CREATE TABLE profiles (
            id          SERIAL       PRIMARY KEY,
            first_name  VARCHAR(100) NOT NULL,
            last_name   VARCHAR(100) NOT NULL,
            profession  VARCHAR(100) NOT NULL,
            balance     BIGINT       NOT NULL DEFAULT 0,
            type        VARCHAR(20)  NOT NULL,
            created_at  TIMESTAMPTZ  NOT NULL DEFAULT NOW(),
            updated_at  TIMESTAMPTZ  NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_profiles_balance_gte_0 CHECK (balance >= 0),
            CONSTRAINT ck_profiles_type CHECK (type IN ('client', 'contractor'))
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_profiles_updated_at
            BEFORE UPDATE ON profiles
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)
    op.execute("COMMENT ON TABLE profiles IS 'Clients and contractors — balance in cents';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS profiles CASCADE;")
    op.execute("DROP FUNCTION IF EXISTS fn_touch_updated_at();")
