from abn_lookup.i18n.catalog import MessageCatalog

__all__ = ["MessageCatalog"]
