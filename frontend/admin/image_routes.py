# frontend/admin/image_routes.py
from flask import abort, current_app, flash, redirect, render_template, request, url_for

from frontend.admin import admin_bp
from frontend.admin.helpers import api_failed, flash_result
from frontend.api import images as images_api
from frontend.api.client import ApiError
from frontend.auth.decorators import admin_required
from frontend.forms.rules import check_upload
from frontend.services.image_crop import CROPPED_FILENAME, CropBox, ImageCropError, crop_image


def _directory_or_404(directory: str) -> str:
    if directory not in current_app.config["IMAGE_DIRECTORIES"]:
        abort(404)
    return directory


def _aspect_ratio(value) -> float:
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        return 1.0
    return ratio if ratio > 0 else 1.0


@admin_bp.route("/images/<directory>")
@admin_required
def image_library(directory):
    directory = _directory_or_404(directory)
    try:
        images = images_api.get_images(directory)
    except ApiError:
        api_failed("Failed to load images")
        images = []
    return render_template(
        "admin/images/library.html",
        directory=directory,
        directories=current_app.config["IMAGE_DIRECTORIES"],
        images=images,
        uploaded=request.args.get("uploaded"),
        to_delete=request.args.get("delete"),
    )


@admin_bp.route("/images/<directory>/upload", methods=["POST"])
@admin_required
def upload_image(directory):
    """Crop the uploaded picture server-side and store it through the API."""
    directory = _directory_or_404(directory)
    upload = request.files.get("image")
    if upload is None or not upload.filename:
        flash("Please choose an image.", "danger")
        return redirect(url_for("admin.image_library", directory=directory))

    problem = check_upload(
        upload,
        current_app.config["MAX_IMAGE_BYTES"],
        current_app.config["SUPPORTED_IMAGE_TYPES"],
    )
    if problem:
        flash(problem, "danger")
        return redirect(url_for("admin.image_library", directory=directory))

    try:
        content = crop_image(
            upload.stream,
            box=CropBox.from_form(request.form),
            aspect_ratio=_aspect_ratio(request.form.get("aspect_ratio")),
        )
    except ImageCropError as e:
        flash(str(e), "danger")
        return redirect(url_for("admin.image_library", directory=directory))

    try:
        resp = images_api.upload_image(content, CROPPED_FILENAME, directory)
    except ApiError:
        api_failed("Failed to upload image")
        return redirect(url_for("admin.image_library", directory=directory))

    if not flash_result(resp, "Image uploaded successfully."):
        return redirect(url_for("admin.image_library", directory=directory))
    current_app.logger.info("Uploaded %s to %s", resp.result, directory)
    return redirect(url_for("admin.image_library", directory=directory, uploaded=resp.result))


@admin_bp.route("/images/<directory>/delete", methods=["POST"])
@admin_required
def delete_image(directory):
    directory = _directory_or_404(directory)
    path = (request.form.get("path") or "").strip()
    if not path:
        flash("No image selected.", "warning")
        return redirect(url_for("admin.image_library", directory=directory))
    try:
        resp = images_api.delete_image(path)
    except ApiError:
        api_failed("Failed to delete image")
    else:
        flash_result(resp, "Image deleted successfully.")
    return redirect(url_for("admin.image_library", directory=directory))
