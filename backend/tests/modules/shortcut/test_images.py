"""Tests for base64 image decoding and upload limits."""

import base64
import pytest

from modules.shortcut.exceptions import ImageValidationError
from modules.shortcut.images import (
    check_image_count,
    decode_and_validate,
    decode_base64_image,
    extension_for,
    max_encoded_size,
)
from modules.shortcut.models import UploadLimits

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def b64(content: bytes) -> str:
    return base64.b64encode(content).decode()


class TestExtensionFor:

    @pytest.mark.parametrize("mime_type,extension", [
        ("image/png", ".png"),
        ("image/gif", ".gif"),
        ("image/webp", ".webp"),
        ("image/jpeg", ".jpg"),
        ("application/octet-stream", ".jpg"),
    ])
    def test_extension(self, mime_type, extension):
        assert extension_for(mime_type) == extension


class TestDecodeBase64Image:

    def test_bare_base64_defaults_to_jpeg(self):
        image = decode_base64_image(b64(b"jpeg-bytes"), 0)

        assert image.content == b"jpeg-bytes"
        assert image.mime_type == "image/jpeg"
        assert image.extension == ".jpg"
        assert image.size == len(b"jpeg-bytes")

    def test_data_url_sets_mime_type(self):
        image = decode_base64_image(f"data:image/png;base64,{b64(PNG_BYTES)}", 2)

        assert image.content == PNG_BYTES
        assert image.mime_type == "image/png"
        assert image.extension == ".png"
        assert image.index == 2

    def test_invalid_base64(self):
        with pytest.raises(ImageValidationError) as exc_info:
            decode_base64_image("not base64 at all!!", 1)

        assert exc_info.value.message == "Failed to process image 2. Please ensure it's a valid image."
        assert exc_info.value.details["index"] == 1

    def test_empty_payload(self):
        with pytest.raises(ImageValidationError):
            decode_base64_image("data:image/png;base64,", 0)

    def test_line_wrapped_base64(self):
        wrapped = base64.encodebytes(PNG_BYTES * 10).decode()
        assert "\n" in wrapped

        image = decode_base64_image(f"data:image/png;base64,{wrapped}", 0)

        assert image.content == PNG_BYTES * 10

    def test_crlf_wrapped_base64(self):
        wrapped = base64.encodebytes(PNG_BYTES * 10).decode().replace("\n", "\r\n")

        assert decode_base64_image(wrapped, 0).content == PNG_BYTES * 10

    def test_unpadded_base64(self):
        unpadded = b64(b"jpeg-bytes").rstrip("=")
        assert len(unpadded) % 4 != 0

        assert decode_base64_image(unpadded, 0).content == b"jpeg-bytes"

    def test_garbage_inside_wrapped_base64_rejected(self):
        wrapped = base64.encodebytes(PNG_BYTES * 10).decode()

        with pytest.raises(ImageValidationError):
            decode_base64_image(wrapped[:20] + "!!" + wrapped[20:], 0)


class TestCheckImageCount:

    def test_no_images(self):
        with pytest.raises(ImageValidationError) as exc_info:
            check_image_count(0, UploadLimits())
        assert exc_info.value.message == "Please select at least one image"

    def test_too_many_images(self):
        with pytest.raises(ImageValidationError) as exc_info:
            check_image_count(4, UploadLimits())
        assert exc_info.value.message == "Maximum 3 images allowed. You selected 4."

    def test_within_limit(self):
        check_image_count(3, UploadLimits())


class TestDecodeAndValidate:

    def test_decodes_in_order(self):
        images = decode_and_validate([b64(b"one"), b64(b"two")], UploadLimits())

        assert [i.content for i in images] == [b"one", b"two"]
        assert [i.index for i in images] == [0, 1]

    def test_image_too_large(self):
        limits = UploadLimits(max_file_size=1024 * 1024)
        big = b64(b"x" * (1024 * 1024 + 1))

        with pytest.raises(ImageValidationError) as exc_info:
            decode_and_validate([b64(b"ok"), big], limits)

        assert exc_info.value.message == "Image 2 is too large. Maximum size is 1MB per image."

    def test_unsupported_format(self):
        with pytest.raises(ImageValidationError) as exc_info:
            decode_and_validate([f"data:image/tiff;base64,{b64(b'tiff')}"], UploadLimits())

        assert "format not supported" in exc_info.value.message

    def test_total_too_large(self):
        limits = UploadLimits(max_file_size=2 * 1024 * 1024, max_total_size=3 * 1024 * 1024)
        chunk = b64(b"x" * (2 * 1024 * 1024 - 10))

        with pytest.raises(ImageValidationError) as exc_info:
            decode_and_validate([chunk, chunk], limits)

        assert exc_info.value.message == (
            "Total file size too large. Maximum is 3MB for all images combined."
        )


class TestMaxEncodedSize:

    def test_fits_largest_wrapped_data_url(self):
        limits = UploadLimits()
        wrapped = base64.encodebytes(b"x" * limits.max_file_size).decode().replace("\n", "\r\n")
        field = f"data:image/webp;base64,{wrapped}"

        assert len(field) <= max_encoded_size(limits)

    def test_scales_with_limit(self):
        assert max_encoded_size(UploadLimits(max_file_size=3 * 1024 * 1024)) > 4 * 1024 * 1024
