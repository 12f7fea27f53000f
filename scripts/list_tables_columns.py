import json

from sqlalchemy import inspect

from shopflow.db import engine, init_db

"""
Vuelca tablas/columnas/FKs de la base configurada (DATABASE_URL).
Uso: python scripts/list_tables_columns.py
"""


def main():
    init_db()
    insp = inspect(engine)
    info = {}
    for table in insp.get_table_names():
        info[table] = {
            "columns": [c["name"] for c in insp.get_columns(table)],
            "fks": [
                f"{','.join(fk['constrained_columns'])} -> {fk['referred_table']}"
                for fk in insp.get_foreign_keys(table)
            ],
        }
    print(json.dumps(info, indent=2))


if __name__ == "__main__":
    main()
