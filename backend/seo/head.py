from models import HeadMetadata, Icon, IconSet, OpenGraph, ResolvedMetadata, TwitterCard

_ICONS = IconSet(
    icon=[
        Icon(url="/favicon-32x32.png", sizes="32x32"),
        Icon(url="/favicon-16x16.png", sizes="16x16"),
    ],
    apple=[Icon(url="/apple-touch-icon.png", sizes="180x180")],
)
_MANIFEST = "/site.webmanifest"


def render_head(resolved: ResolvedMetadata) -> HeadMetadata:
    """
    Map resolved metadata onto the <head> payload (title, description, Open Graph,
    Twitter card, icons, manifest). An omitted og_image yields an empty image list
    so the platform default applies.
    """
    images = [resolved.og_image] if resolved.og_image else []
    return HeadMetadata(
        title=resolved.title,
        description=resolved.description,
        open_graph=OpenGraph(
            title=resolved.title,
            description=resolved.description,
            images=list(images),
        ),
        twitter=TwitterCard(
            title=resolved.title,
            description=resolved.description,
            images=list(images),
        ),
        icons=_ICONS.model_copy(deep=True),
        manifest=_MANIFEST,
    )
