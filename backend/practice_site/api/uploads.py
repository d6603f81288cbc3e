from flask import request, jsonify
from flask_jwt_extended import jwt_required
from practice_site.application.content.ordered import get_item, update_item
from practice_site.application.site_config import set_config
from practice_site.models.testimonial import Testimonial
from practice_site.normalizers.content import normalize_testimonial
from practice_site.utils.decorators import roles_required
from practice_site.utils.media import delete_file, save_image, save_seo_image
from . import api_bp


def _uploaded_image():
    return request.files.get("image")


@api_bp.route("/admin/upload/<upload_type>", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload(upload_type):
    path = save_image(_uploaded_image(), upload_type)

    if upload_type == "hero":
        set_config("hero_image", {"path": path})

    return jsonify({"success": True, "path": path})


@api_bp.route("/admin/hero/image", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload_hero_image():
    image_url = save_image(_uploaded_image(), "hero", max_width=1920, max_height=1080, quality=85)
    set_config("hero_image_url", image_url)
    return jsonify({"image_url": image_url})


@api_bp.route("/admin/avatar", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload_avatar():
    avatar_url = save_image(_uploaded_image(), "hero", max_width=400, max_height=400, quality=90)
    set_config("avatar_url", avatar_url)
    return jsonify({"avatar_url": avatar_url})


@api_bp.route("/admin/testimonials/<testimonial_id>/image", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload_testimonial_image(testimonial_id):
    previous = get_item(Testimonial, testimonial_id).photo

    image_url = save_image(_uploaded_image(), "testimonials", max_width=300, max_height=300, quality=85)
    try:
        testimonial = update_item(Testimonial, testimonial_id, {"photo": image_url})
    except Exception:
        delete_file(image_url)
        raise

    if previous and previous != image_url:
        delete_file(previous)

    return jsonify({"image_url": image_url, "testimonial": normalize_testimonial(testimonial, admin=True)})


@api_bp.route("/admin/upload-image", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload_image():
    """Generic upload; folder=seo produces the Open Graph cover."""
    folder = request.form.get("folder") or "articles"

    if folder == "seo":
        url = save_seo_image(_uploaded_image())
    else:
        url = save_image(_uploaded_image(), folder)

    return jsonify({"success": True, "url": url})


@api_bp.route("/admin/upload-image/support", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_upload_support_image():
    url = save_image(_uploaded_image(), "support")
    return jsonify({"success": True, "url": url})
