# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Comment board walkthrough against a Supabase project.

Expects two tables:

- ``users``: ``id``, ``nickname``, ``email``
- ``comments``: ``id``, ``user_id``, ``content``, ``created_at``

Run with SUPABASE_URL and SUPABASE_KEY set, or enter them when prompted.
"""

import os
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from restbridge import HttpError, RestBridgeClient


def log_call(call: str) -> None:
    print({"call": call})


base_url = os.environ.get("SUPABASE_URL") or input("Enter Supabase project URL: ").strip()
api_key = os.environ.get("SUPABASE_KEY") or input("Enter anon key: ").strip()
if not base_url or not api_key:
    print("URL and key are required; exiting.")
    sys.exit(1)

email = input("Email: ").strip()
password = input("Password: ").strip()
nickname = input("Nickname: ").strip() or email.split("@")[0]

with RestBridgeClient(base_url, api_key) as client:
    log_call("client.sign_in(...)")
    session = client.sign_in(email, password)
    print(f"Signed in as {session.user.get('email') if session.user else email}")

    log_call(f"client.query('users', {{'nickname': {nickname!r}}})")
    users = client.query("users", {"nickname": nickname})
    if users:
        user = users[0]
    else:
        log_call("client.insert('users', ...)")
        try:
            user = client.insert("users", {"nickname": nickname, "email": email})[0]
        except HttpError as ex:
            print(f"Could not register nickname: {ex.message}")
            client.sign_out()
            sys.exit(1)

    content = input("Comment: ").strip() or "Hello from restbridge"
    log_call("client.insert('comments', ...)")
    created = client.insert("comments", {"user_id": user["id"], "content": content})
    print(f"Created comment {created[0]['id']}")

    log_call("client.read('comments', order=created_at.desc, limit=50)")
    for row in client.read("comments", {"order": {"column": "created_at", "direction": "desc"}, "limit": 50}):
        print(f"[{row.get('created_at')}] {row.get('user_id')}: {row.get('content')}")

    log_call(f"client.update_by_id('comments', {created[0]['id']}, ...)")
    client.update_by_id("comments", created[0]["id"], {"content": content + " (edited)"})

    log_call(f"client.delete_by_id('comments', {created[0]['id']})")
    deleted = client.delete_by_id("comments", created[0]["id"])
    print(f"Deleted {len(deleted)} comment(s)")

    log_call("client.sign_out()")
    client.sign_out()
