from .sitemap import DEFAULT_SITE_URL, build_sitemap, render_sitemap_xml, site_url_from_env

__all__ = ["DEFAULT_SITE_URL", "build_sitemap", "render_sitemap_xml", "site_url_from_env"]
