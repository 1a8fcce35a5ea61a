#!/usr/bin/env python3
"""
Basic SDK usage examples for the Context.IO client.

Reads credentials from CONTEXTIO_CONSUMER_KEY / CONTEXTIO_CONSUMER_SECRET
and the mailbox from CONTEXTIO_ACCOUNT.
"""

import asyncio
import os

from contextio import Action, AsyncContextIO, ContextIO, ContextIOError


def recent_messages(account: str):
    """List messages indexed since the epoch."""
    print("=== Recent Messages ===")

    with ContextIO.from_settings() as client:
        try:
            response = client.all_messages(account, {"since": "0", "limit": "5"})
        except ContextIOError as e:
            print(f"❌ Request failed: {e.message}")
            return

        if response.has_error:
            print(f"❌ API returned {response.code} ({response.content_type})")
            print(response.body)
            return

        for message in response.json().get("data", []):
            print(f"✓ {message.get('subject')}")


def generic_dispatch(account: str):
    """Call an action through the action table."""
    print("\n=== Generic Dispatch ===")

    with ContextIO.from_settings(auth_headers=True) as client:
        response = client.execute(Action.CONTACT_SEARCH, account, search="alice")
        print(f"✓ {response.code}: {response.body[:200]}")


async def several_mailboxes(accounts):
    """Query several mailboxes concurrently."""
    print("\n=== Several Mailboxes ===")

    async with AsyncContextIO.from_settings() as client:
        responses = await client.get_many(accounts, "search.json", {"subject": "invoice"})

    for account, response in zip(accounts, responses):
        status = "❌" if response.has_error else "✓"
        print(f"{status} {account}: {response.code}")


if __name__ == "__main__":
    mailbox = os.getenv("CONTEXTIO_ACCOUNT", "me@example.com")
    recent_messages(mailbox)
    generic_dispatch(mailbox)
    asyncio.run(several_mailboxes([mailbox]))
