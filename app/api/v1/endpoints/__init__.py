from . import planets, members

__all__ = ["planets", "members"]
