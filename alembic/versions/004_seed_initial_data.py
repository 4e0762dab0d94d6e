"""004: seed initial data

Revision ID: 004
Revises: 003
Create Date: 2026-10-18

Sample marketplace for local development. All amounts in cents.
"""

from typing import Sequence, Union

from alembic import op

revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        INSERT INTO profiles (id, first_name, last_name, profession, balance, type) VALUES
            (1, 'Harry',   'Potter',                 'Wizard',         115000, 'client'),
            (2, 'Mr',      'Robot',                  'Hacker',          23111, 'client'),
            (3, 'John',    'Snow',                   'Knows nothing',   45130, 'client'),
            (4, 'Ash',     'Kethcum',                'Pokemon master',    130, 'client'),
            (5, 'John',    'Lenon',                  'Musician',         6400, 'contractor'),
            (6, 'Linus',   'Torvalds',               'Programmer',     121400, 'contractor'),
            (7, 'Alan',    'Turing',                 'Programmer',       2200, 'contractor'),
            (8, 'Aragorn', 'II Elessar Telcontarvalds', 'Fighter',      31400, 'contractor');
    """)
    op.execute("""
        INSERT INTO contracts (id, terms, status, client_id, contractor_id) VALUES
            (1, 'bla bla bla', 'terminated',  1, 5),
            (2, 'bla bla bla', 'in_progress', 1, 6),
            (3, 'bla bla bla', 'in_progress', 2, 6),
            (4, 'bla bla bla', 'in_progress', 2, 7),
            (5, 'bla bla bla', 'new',         3, 8),
            (6, 'bla bla bla', 'in_progress', 3, 7),
            (7, 'bla bla bla', 'in_progress', 4, 7),
            (8, 'bla bla bla', 'in_progress', 4, 6),
            (9, 'bla bla bla', 'in_progress', 4, 8);
    """)
    op.execute("""
        INSERT INTO jobs (id, description, price, paid, payment_date, contract_id, created_at) VALUES
            (1,  'work', 20000, FALSE, NULL,                        1, '2020-08-10T10:00:00Z'),
            (2,  'work', 20100, FALSE, NULL,                        2, '2020-08-10T10:00:00Z'),
            (3,  'work', 20200, FALSE, NULL,                        3, '2020-08-10T10:00:00Z'),
            (4,  'work', 20000, FALSE, NULL,                        4, '2020-08-10T10:00:00Z'),
            (5,  'work', 20000, FALSE, NULL,                        7, '2020-08-10T10:00:00Z'),
            (6,  'work',  2020, TRUE,  '2020-08-15T19:11:26Z',      7, '2020-08-15T19:11:26Z'),
            (7,  'work',  2020, TRUE,  '2020-08-15T19:11:26Z',      7, '2020-08-15T19:11:26Z'),
            (8,  'work', 12100, TRUE,  '2020-08-15T19:11:26Z',      2, '2020-08-15T19:11:26Z'),
            (9,  'work', 12100, TRUE,  '2020-08-14T23:11:26Z',      3, '2020-08-14T23:11:26Z'),
            (10, 'work',  2100, TRUE,  '2020-08-17T19:11:26Z',      1, '2020-08-17T19:11:26Z'),
            (11, 'work',  2100, TRUE,  '2020-08-17T19:11:26Z',      5, '2020-08-17T19:11:26Z'),
            (12, 'work',  2100, TRUE,  '2020-08-17T19:11:26Z',      6, '2020-08-17T19:11:26Z'),
            (13, 'work',  2100, TRUE,  '2020-08-17T19:11:26Z',      8, '2020-08-17T19:11:26Z'),
            (14, 'work',  2100, TRUE,  '2020-08-17T19:11:26Z',      9, '2020-08-17T19:11:26Z');
    """)
    # Explicit ids above do not advance the SERIAL sequences.
    for table in ("profiles", "contracts", "jobs"):
        op.execute(f"SELECT setval('{table}_id_seq', (SELECT MAX(id) FROM {table}));")


def downgrade() -> None:
    op.execute("DELETE FROM jobs WHERE id BETWEEN 1 AND 14;")
    op.execute("DELETE FROM contracts WHERE id BETWEEN 1 AND 9;")
    op.execute("DELETE FROM profiles WHERE id BETWEEN 1 AND 8;")
