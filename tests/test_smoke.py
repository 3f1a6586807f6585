from sqlcat import Builder, parse_orders


class _FakeConnection:
    def __init__(self):
        self.calls = []

    def fetch(self, sql: str, *args):
        assert "SELECT" in sql and "FROM" in sql
        self.calls.append((sql, args))
        return []


def test_builder_output_feeds_driver_smoke():
    conn = _FakeConnection()
    builder = Builder(table="pets", columns=["id", "name"])
    builder.with_condition("name ILIKE $n", "%Korone%")
    builder.with_orders(parse_orders(["name:asc"]))
    builder.with_limit(10)

    sql, args = builder.to_sql()
    conn.fetch(sql, *args)
    count_sql, count_args = builder.to_sql_count()
    conn.fetch(count_sql, *count_args)

    assert conn.calls[0][1] == ("%Korone%",)
    assert conn.calls[1][1] == conn.calls[0][1]
