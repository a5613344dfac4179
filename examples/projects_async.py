#!/usr/bin/env python3
"""
Async example demonstrating Venus projects API usage.

It logs in, performs a full CRUD cycle on a project (list, create, read,
update, delete) and logs out again.

Requirements:
- A running Venus backend (VENUS_API_URL, or VENUS_ENV=development for
  http://localhost:8085)
- VENUS_USERNAME and VENUS_PASSWORD for an existing account

Usage:
    python examples/projects_async.py
"""

import asyncio
import os
from datetime import datetime

from dotenv import load_dotenv

from venus_client import APIError, AsyncVenusClient, InMemorySessionStore

load_dotenv()


async def main() -> None:
    """Demonstrate async projects API usage."""
    print("🚀 Venus Projects API - Async Example")
    print("=" * 50)

    username = os.getenv("VENUS_USERNAME")
    password = os.getenv("VENUS_PASSWORD")
    if not (username and password):
        print("❌ Error: VENUS_USERNAME and VENUS_PASSWORD are required")
        return

    async with AsyncVenusClient(store=InMemorySessionStore()) as client:
        print(f"📋 Using API at {client.config.base_url}")

        try:
            session = await client.auth.login({"username": username, "password": password})
            user = session.user.username if session.user else username
            print(f"✅ Logged in as {user}")

            print("\n1️⃣ Listing existing projects...")
            projects = await client.projects.get_projects()
            print(f"   Found {len(projects)} existing projects")
            for project in projects[:3]:
                print(f"   - {project.name} ({project.id})")

            print("\n2️⃣ Creating a new test project...")
            name = f"example-{datetime.now().strftime('%Y%m%d%H%M%S')}"
            created = await client.projects.create_project({"name": name})
            print(f"   Created {created.name} ({created.id})")

            print("\n3️⃣ Updating its content...")
            await client.projects.update_project(created.id, {"content": {"nodes": []}})
            fetched = await client.projects.get_project_by_id(created.id)
            print(f"   Content is now {fetched.content}")

            print("\n4️⃣ Deleting it...")
            await client.projects.delete_project(created.id)
            print("   Deleted")
        except APIError as e:
            print(f"❌ API error: {e}")
        finally:
            client.auth.logout()
            print("\n👋 Logged out")


if __name__ == "__main__":
    asyncio.run(main())
