"""
Initialize database tables for Ecclesia.
Run this once to create the required tables in your Postgres database.
"""

import os
import sys
import psycopg2

SCHEMA = """
-- Student sessions (identity captured at onboarding)
CREATE TABLE IF NOT EXISTS student_sessions (
    id VARCHAR PRIMARY KEY,
    full_name VARCHAR NOT NULL,
    email VARCHAR NOT NULL,
    status VARCHAR NOT NULL DEFAULT 'active',
    started_at TIMESTAMP DEFAULT NOW(),
    completed_at TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_student_sessions_email ON student_sessions(email);

-- End-of-session reports
CREATE TABLE IF NOT EXISTS session_reports (
    session_id VARCHAR PRIMARY KEY REFERENCES student_sessions(id) ON DELETE CASCADE,
    outcome VARCHAR,
    total_decisions INTEGER DEFAULT 0,
    report JSONB NOT NULL,
    created_at TIMESTAMP DEFAULT NOW()
);

CREATE INDEX IF NOT EXISTS idx_session_reports_outcome ON session_reports(outcome);
"""


def init_db():
    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        print("ERROR: DATABASE_URL environment variable not set")
        sys.exit(1)

    print("Connecting to database...")
    conn = psycopg2.connect(database_url)
    cur = conn.cursor()

    print("Creating tables...")
    cur.execute(SCHEMA)
    conn.commit()

    print("Done! Tables created successfully.")

    cur.close()
    conn.close()


if __name__ == "__main__":
    init_db()
