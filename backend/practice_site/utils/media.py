import os
import uuid
from werkzeug.utils import secure_filename
from flask import current_app

from practice_site.domain.invariants.exceptions import InvariantViolation
from practice_site.utils.image_optimizer import optimize_image, create_seo_cover

UPLOAD_TYPES = {"hero", "testimonials", "carousel", "articles", "support", "secret", "gallery", "seo"}

UPLOADS_URL_PREFIX = "/uploads/"


def upload_root():
    return current_app.config["UPLOAD_FOLDER"]


def url_to_path(file_url):
    """Map a /uploads/... URL to its location under UPLOAD_FOLDER, or None."""
    if not file_url or not file_url.startswith(UPLOADS_URL_PREFIX):
        return None

    relative = file_url[len(UPLOADS_URL_PREFIX):]
    root = os.path.abspath(upload_root())
    path = os.path.abspath(os.path.join(root, relative))

    if os.path.commonpath([root, path]) != root:
        return None
    return path


def _store_original(file, upload_type):
    if upload_type not in UPLOAD_TYPES:
        raise InvariantViolation(f"Unknown upload type: {upload_type}")

    if not file or not file.filename:
        raise InvariantViolation("No file uploaded")

    if not (file.mimetype or "").startswith("image/"):
        raise InvariantViolation("Only image uploads are allowed")

    filename = secure_filename(file.filename) or "upload"
    stem, ext = os.path.splitext(filename)
    unique_stem = f"{stem[:40] or upload_type}-{uuid.uuid4().hex[:12]}"

    target_dir = os.path.join(upload_root(), upload_type)
    os.makedirs(target_dir, exist_ok=True)

    original_path = os.path.join(target_dir, f"{unique_stem}-original{ext.lower()}")
    file.save(original_path)
    return target_dir, unique_stem, original_path


def save_image(file, upload_type, **optimizer_options):
    """
    Save an uploaded image, convert it to WebP and drop the original.
    Returns the public URL (/uploads/<type>/<name>.webp).
    """
    target_dir, stem, original_path = _store_original(file, upload_type)

    try:
        output_path = optimize_image(
            original_path,
            upload_type,
            output_dir=target_dir,
            output_stem=stem,
            **optimizer_options,
        )
    finally:
        _remove_quietly(original_path)

    return f"{UPLOADS_URL_PREFIX}{upload_type}/{os.path.basename(output_path)}"


def save_seo_image(file):
    target_dir, _, original_path = _store_original(file, "seo")

    try:
        output_path = create_seo_cover(original_path, output_dir=target_dir)
    finally:
        _remove_quietly(original_path)

    return f"{UPLOADS_URL_PREFIX}seo/{os.path.basename(output_path)}"


def _remove_quietly(path):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def delete_file(file_url):
    """
    Deletes a previously uploaded file given its /uploads/... URL.
    """
    file_path = url_to_path(file_url)
    if not file_path or not os.path.exists(file_path):
        return False

    try:
        os.remove(file_path)
        return True
    except OSError as e:
        current_app.logger.error(f"Failed to delete file {file_path}: {e}")
        return False
