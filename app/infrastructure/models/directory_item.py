"""SQLAlchemy table holding key-value items of the channel directory."""

from sqlalchemy import JSON, Column, MetaData, String, Table, Text

# MySQL cannot index TEXT keys; two utf8mb4 columns of 384 characters fill its 3072-byte key limit.
KEY_TYPE = Text().with_variant(String(384), "mysql", "mariadb")


def build_directory_item_table(metadata: MetaData, table_name: str) -> Table:
    """Return the item table named ``table_name`` registered on ``metadata``.

    Items are addressed by a partition key (``pk``) and a sort key (``sk``);
    everything else lives in the typed ``attributes`` map.
    """

    existing = metadata.tables.get(table_name)
    if existing is not None:
        return existing
    return Table(
        table_name,
        metadata,
        Column("pk", KEY_TYPE, primary_key=True),
        Column("sk", KEY_TYPE, primary_key=True),
        Column("attributes", JSON, nullable=False, default=dict),
    )


__all__ = ["build_directory_item_table"]
