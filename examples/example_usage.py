from sqlcat import Builder, parse_orders

builder = Builder(
    table="pets AS p",
    columns=["p.id", "p.name", "o.name AS owner"],
    relations=["JOIN owners AS o ON o.id = p.owner_id"],
)
builder.with_condition("p.name ILIKE $n", "%Korone%")
builder.with_condition("p.age BETWEEN $n AND $n", 1, 5)
builder.with_orders(parse_orders(["p.name:asc", "p.id:desc"]))
builder.with_limit(30)
builder.with_offset(60)

sql, args = builder.to_sql()
print(sql)
print(args)

count_sql, count_args = builder.to_sql_count()
print(count_sql)
print(count_args)
