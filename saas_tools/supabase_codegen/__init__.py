"""Supabase SQL Generator - Generates table migrations and RLS policies."""

from .main import (
    RLS_POLICIES,
    create_table_sql,
    migration_path,
    rls_policy_sql,
    main,
)

__all__ = [
    "RLS_POLICIES",
    "create_table_sql",
    "migration_path",
    "rls_policy_sql",
    "main",
]
