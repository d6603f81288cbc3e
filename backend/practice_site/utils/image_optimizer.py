import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from practice_site.domain.invariants.exceptions import InvariantViolation

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {"max_width": 1200, "max_height": 800, "quality": 85}

# Per upload type: box the image must fit inside, and WebP quality
TYPE_SETTINGS = {
    "hero": {"max_width": 1200, "max_height": 800, "quality": 90},
    "carousel": {"max_width": 1200, "max_height": 800, "quality": 90},
    "articles": {"max_width": 1200, "max_height": 800, "quality": 90},
    "testimonials": {"max_width": 400, "max_height": 400, "quality": 85},
    "support": {"max_width": 800, "max_height": 600, "quality": 85},
    "secret": {"max_width": 800, "max_height": 600, "quality": 85},
}

SEO_COVER_SIZE = (1200, 630)
SEO_COVER_QUALITY = 85


def settings_for(upload_type, **overrides):
    settings = {**DEFAULT_SETTINGS, **TYPE_SETTINGS.get(upload_type, {})}
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return settings


def _open(input_path):
    try:
        img = Image.open(input_path)
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise InvariantViolation("Uploaded file is not a valid image") from exc
    return img


def _to_web_mode(img):
    if img.mode in ("RGBA", "LA", "P"):
        return img.convert("RGBA")
    if img.mode != "RGB":
        return img.convert("RGB")
    return img


def optimize_image(input_path, upload_type, *, output_dir, output_stem=None,
                   max_width=None, max_height=None, quality=None):
    """
    Shrink an image to fit inside the type's box (never enlarging) and
    write it as WebP into output_dir. Returns the written path.
    """
    settings = settings_for(upload_type, max_width=max_width, max_height=max_height, quality=quality)
    stem = output_stem or Path(input_path).stem
    output_path = os.path.join(output_dir, f"{stem}.webp")
    os.makedirs(output_dir, exist_ok=True)

    with _open(input_path) as img:
        original_size = img.size
        processed = _to_web_mode(ImageOps.exif_transpose(img))
        processed.thumbnail((settings["max_width"], settings["max_height"]), Image.Resampling.LANCZOS)
        processed.save(output_path, "WEBP", quality=settings["quality"])

    logger.info(
        "Optimized %s image %s -> %s (%sx%s -> %sx%s, q%s)",
        upload_type, os.path.basename(input_path), os.path.basename(output_path),
        original_size[0], original_size[1], processed.width, processed.height,
        settings["quality"],
    )
    return output_path


def create_seo_cover(input_path, *, output_dir):
    """Center-cropped 1200x630 JPEG for Open Graph previews."""
    os.makedirs(output_dir, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")
    output_path = os.path.join(output_dir, f"seo-{stamp}.jpg")

    with _open(input_path) as img:
        cover = ImageOps.fit(
            ImageOps.exif_transpose(img).convert("RGB"),
            SEO_COVER_SIZE,
            Image.Resampling.LANCZOS,
            centering=(0.5, 0.5),
        )
        cover.save(output_path, "JPEG", quality=SEO_COVER_QUALITY, optimize=True)

    return output_path
