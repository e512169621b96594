"""Catalog queries issued by the PostgreSQL dialect."""

EXCLUDED_TABLE_SCHEMAS = ("temp", "pg_catalog", "information_schema")

TABLES = """
    SELECT *
    FROM pg_tables
    WHERE schemaname NOT IN (%s, %s, %s);
"""

COLUMNS = """
    SELECT
        table_name,
        table_schema,
        column_name,
        data_type,
        udt_name,
        character_maximum_length,
        is_nullable,
        column_default
    FROM
        INFORMATION_SCHEMA.COLUMNS
    WHERE
        table_name = %s AND table_schema = %s;
"""

# indkey_names holds pg_get_indexdef() of every key position, in key order.
# indrelid is the owning table's relname rather than its OID.
INDEXES = """
    SELECT
        i.relname AS indname,
        i.relowner::int AS indowner,
        t.relname::text AS indrelid,
        idx.indisprimary,
        idx.indisunique,
        am.amname AS indam,
        idx.indkey::int2[] AS indkey,
        ARRAY(
            SELECT pg_get_indexdef(idx.indexrelid, k + 1, true)
            FROM generate_subscripts(idx.indkey, 1) AS k
            ORDER BY k
        ) AS indkey_names,
        idx.indexprs IS NOT NULL AS indexprs,
        idx.indpred IS NOT NULL AS indpred,
        ns.nspname
    FROM
        pg_index AS idx
    JOIN pg_class AS i
        ON i.oid = idx.indexrelid
    JOIN pg_class AS t
        ON t.oid = idx.indrelid
    JOIN pg_am AS am
        ON i.relam = am.oid
    JOIN pg_namespace AS ns
        ON ns.oid = i.relnamespace
        AND ns.nspname NOT IN ('pg_catalog', 'pg_toast');
"""

SEQUENCES = "SELECT * FROM information_schema.sequences;"
