"""Errors raised while turning a request into a list of word translations.

Every error carries a message that is safe to show to the user as-is and the
HTTP status the JSON API answers with.
"""


class TranslationError(Exception):
    status_code = 500
    default_message = "Terjadi kesalahan yang tidak diketahui."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(TranslationError):
    status_code = 503
    default_message = (
        "API Key belum dikonfigurasi. "
        "Silakan atur variabel lingkungan KITAB_API_KEY (atau API_KEY)."
    )


class EmptyInputError(TranslationError):
    status_code = 400
    default_message = "Silakan masukkan teks Arab untuk diterjemahkan."


class UnsupportedImageTypeError(TranslationError):
    status_code = 415
    default_message = "Format gambar tidak didukung. Gunakan PNG, JPG, atau WEBP."


class RemoteCallError(TranslationError):
    status_code = 502
    default_message = (
        "Gagal mendapatkan terjemahan dari model AI. Silakan coba lagi nanti."
    )


class InvalidResponseShapeError(TranslationError):
    status_code = 502
    default_message = "Struktur JSON yang diterima dari model AI tidak valid."
