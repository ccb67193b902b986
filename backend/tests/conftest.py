"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach real providers or a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH_SECRET", "test-auth-secret")
os.environ.setdefault("LOG_FORMAT", "text")
for key in (
    "PAYSTACK_SECRET_KEY", "YOUTUBE_API_KEY",
    "CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET",
    "VAPID_PUBLIC_KEY", "VAPID_PRIVATE_KEY",
):
    os.environ[key] = ""
