from io import BytesIO

from PIL import Image, UnidentifiedImageError

import config
from platforms.base import MediaAttachment

MIME_MAP = {
    "jpeg": "image/jpeg",
    "jpg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}


def allowed_file(filename):
    return (
        "." in filename
        and filename.rsplit(".", 1)[1].lower() in config.ALLOWED_EXTENSIONS
    )


def get_mime_type(data):
    """Sniff an image's mime type from its bytes, defaulting to JPEG."""
    try:
        img = Image.open(BytesIO(data))
    except (UnidentifiedImageError, OSError):
        return "image/jpeg"
    return MIME_MAP.get((img.format or "").lower(), "image/jpeg")


def load_attachment(file_path, alt_text=""):
    """Read an image from disk into a MediaAttachment."""
    if not allowed_file(file_path):
        raise ValueError(f"Unsupported media file: {file_path}")
    with open(file_path, "rb") as f:
        data = f.read()
    return MediaAttachment(data=data, mime_type=get_mime_type(data), alt_text=alt_text)


def load_attachments(file_paths, alt_texts=()):
    """Load up to MAX_IMAGES attachments, pairing alt texts by position."""
    attachments = []
    for i, file_path in enumerate(file_paths[: config.MAX_IMAGES]):
        alt_text = alt_texts[i] if i < len(alt_texts) else ""
        attachments.append(load_attachment(file_path, alt_text))
    return attachments
