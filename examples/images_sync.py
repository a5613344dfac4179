#!/usr/bin/env python3
"""
Sync example demonstrating the Venus images API.

Uploads an image file, prints its direct URL, lists images and deletes the
upload. The session token is kept in the default session file, so a login
from an earlier run is reused.

Usage:
    python examples/images_sync.py path/to/image.png [project_id]
"""

import os
import sys

from dotenv import load_dotenv

from venus_client import APIError, VenusClient

load_dotenv()


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__)
        return 1
    path = sys.argv[1]
    project_id = sys.argv[2] if len(sys.argv) > 2 else None

    with VenusClient() as client:
        if not client.auth.is_authenticated():
            username = os.getenv("VENUS_USERNAME")
            password = os.getenv("VENUS_PASSWORD")
            if not (username and password):
                print("❌ Not logged in and VENUS_USERNAME/VENUS_PASSWORD not set")
                return 1
            client.auth.login({"username": username, "password": password})

        try:
            image = client.images.upload_image(path, project_id)
            print(f"✅ Uploaded {image.original_name} as {image.id}")
            print(f"   URL: {client.images.get_image_url(image.id)}")

            images = client.images.list_images()
            print(f"📋 {len(images)} images in total")

            client.images.delete_image(image.id)
            print("🗑️  Deleted the upload")
        except APIError as e:
            print(f"❌ API error: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
