import os

import pytest
from PIL import Image

from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.utils.image_optimizer import create_seo_cover, optimize_image, settings_for


def _image(tmp_path, name, size, mode="RGB", fmt="PNG"):
    path = tmp_path / name
    color = (10, 120, 200, 128) if mode == "RGBA" else (10, 120, 200)
    Image.new(mode, size, color).save(path, fmt)
    return str(path)


def test_settings_per_type_and_overrides():
    assert settings_for("testimonials") == {"max_width": 400, "max_height": 400, "quality": 85}
    assert settings_for("gallery") == {"max_width": 1200, "max_height": 800, "quality": 85}
    assert settings_for("hero", max_width=1920, max_height=1080, quality=None) == {
        "max_width": 1920, "max_height": 1080, "quality": 90,
    }


def test_large_images_are_shrunk_to_fit(tmp_path):
    source = _image(tmp_path, "big.png", (2400, 1200))

    output = optimize_image(source, "carousel", output_dir=str(tmp_path / "out"))

    assert output.endswith("big.webp")
    with Image.open(output) as img:
        assert img.format == "WEBP"
        assert img.size == (1200, 600)


def test_small_images_are_not_enlarged(tmp_path):
    source = _image(tmp_path, "small.jpg", (200, 100), fmt="JPEG")

    output = optimize_image(source, "hero", output_dir=str(tmp_path), output_stem="hero-1")

    assert os.path.basename(output) == "hero-1.webp"
    with Image.open(output) as img:
        assert img.size == (200, 100)


def test_transparency_is_kept(tmp_path):
    source = _image(tmp_path, "logo.png", (500, 500), mode="RGBA")

    output = optimize_image(source, "testimonials", output_dir=str(tmp_path / "out"))

    with Image.open(output) as img:
        assert img.mode == "RGBA"
        assert img.size == (400, 400)


def test_invalid_file_is_rejected(tmp_path):
    bogus = tmp_path / "not-an-image.png"
    bogus.write_bytes(b"definitely not pixels")

    with pytest.raises(InvariantViolation):
        optimize_image(str(bogus), "support", output_dir=str(tmp_path))


def test_seo_cover_is_cropped_to_open_graph_size(tmp_path):
    source = _image(tmp_path, "portrait.png", (900, 1600))

    output = create_seo_cover(source, output_dir=str(tmp_path / "seo"))

    assert os.path.basename(output).startswith("seo-")
    with Image.open(output) as img:
        assert img.format == "JPEG"
        assert img.size == (1200, 630)
