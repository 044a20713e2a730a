# Standard library imports
import html
from typing import Sequence

NO_MATCHES_TEXT = "No matching images found."

CONTAINER_STYLE = "text-align: center; padding: 20px;"
GALLERY_ROW_STYLE = "display: flex; flex-wrap: wrap; justify-content: center;"
MATCHED_ROW_STYLE = "display: flex; flex-wrap: wrap; justify-content: center; margin-top: 20px;"

MAIN_IMAGE_STYLE = "width: 300px; height: auto; border: 3px solid black; margin-bottom: 20px;"
GALLERY_IMAGE_STYLE = "width: 140px; height: auto; margin: 5px; border: 1px solid gray;"
MATCHED_IMAGE_STYLE = "width: 140px; height: auto; margin: 5px; border: 3px solid green;"

_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div style="{container_style}">
<h2>Main Image</h2>
{main}
<h2>All Images</h2>
<div style="{gallery_row_style}">
{gallery}
</div>
<h2>Matched Images</h2>
<div style="{matched_row_style}">
{matched}
</div>
</div>
</body>
</html>
"""


def _img(src: str, alt: str, style: str) -> str:
    return (
        f'<img src="{html.escape(src, quote=True)}" '
        f'alt="{html.escape(alt, quote=True)}" style="{style}">'
    )


def render_widget_page(
    main_image: str,
    gallery: Sequence[str],
    matched: Sequence[str],
    title: str = "Face Gallery",
) -> str:
    """
    Render the widget as a standalone HTML page.

    Three regions: the main image, every gallery image, and the matched
    subset. When nothing matched, the last region shows NO_MATCHES_TEXT.
    References are escaped and used as-is for the img src.
    """
    main_html = _img(main_image, "Main", MAIN_IMAGE_STYLE) if main_image else ""
    gallery_html = "\n".join(
        _img(ref, f"Gallery {index}", GALLERY_IMAGE_STYLE)
        for index, ref in enumerate(gallery)
    )
    if matched:
        matched_html = "\n".join(
            _img(ref, f"Matched {index}", MATCHED_IMAGE_STYLE)
            for index, ref in enumerate(matched)
        )
    else:
        matched_html = f"<p>{NO_MATCHES_TEXT}</p>"

    return _PAGE_TEMPLATE.format(
        title=html.escape(title),
        container_style=CONTAINER_STYLE,
        gallery_row_style=GALLERY_ROW_STYLE,
        matched_row_style=MATCHED_ROW_STYLE,
        main=main_html,
        gallery=gallery_html,
        matched=matched_html,
    )
