"""Share link rendering."""

from share_count.rendering.links import LINK_TEMPLATES, LinkRenderer, LinkTemplate

__all__ = ["LinkRenderer", "LinkTemplate", "LINK_TEMPLATES"]
