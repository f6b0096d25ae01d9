"""Draw the application icon.

The icon is rendered with Pillow at runtime, so no image files need to be
shipped. Run this module directly to also write it to disk:
    python -m conman.assets.icon_generator
"""

from pathlib import Path

from PIL import Image, ImageDraw

ICO_SIZES = [(16, 16), (32, 32), (48, 48), (256, 256)]


def create_app_icon(size: int = 256) -> Image.Image:
    """Create the application icon.

    Draws an open ring ("C" for conman) on a dark green disc.

    Args:
        size: Width and height in pixels

    Returns:
        RGBA image of the requested size
    """
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    # Background circle
    margin = size // 16
    draw.ellipse(
        [margin, margin, size - margin, size - margin],
        fill=(58, 74, 44, 255)
    )

    # Open ring forming a "C"
    center = size // 2
    radius = size // 3
    line_width = max(size // 10, 1)
    draw.arc(
        [center - radius, center - radius, center + radius, center + radius],
        start=45, end=315,
        fill=(230, 200, 120, 255),
        width=line_width
    )

    # Center mark
    dot = max(size // 12, 1)
    draw.rectangle(
        [center - dot, center - dot, center + dot, center + dot],
        fill=(230, 200, 120, 255)
    )

    return img


def generate_icon_files(output_dir: Path | None = None) -> list[Path]:
    """Write the icon as PNG and multi-size ICO.

    Args:
        output_dir: Target directory, defaults to an icons folder next to this module

    Returns:
        Paths of the written files
    """
    if output_dir is None:
        output_dir = Path(__file__).parent / "icons"

    output_dir.mkdir(parents=True, exist_ok=True)

    app_256 = create_app_icon(256)
    png_path = output_dir / "app_icon.png"
    app_256.save(png_path)

    ico_path = output_dir / "app_icon.ico"
    app_256.save(ico_path, format='ICO', sizes=ICO_SIZES)

    return [png_path, ico_path]


if __name__ == "__main__":
    for path in generate_icon_files():
        print(f"Created: {path}")
