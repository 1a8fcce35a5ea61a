"""
Declarative table of Context.IO API actions.

Each ``Action`` maps to an ``ActionSpec`` describing the HTTP verb, the
action path, the allow-listed parameter names (in their canonical casing)
and any parameters the call always sends.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .exceptions import InvalidInputError


@dataclass(frozen=True)
class ActionSpec:
    path: str
    allowed: Tuple[str, ...] = ()
    method: str = "GET"
    fixed: Dict[str, str] = field(default_factory=dict)
    scoped: bool = True
    summary: str = ""


class Action(str, Enum):
    ADDRESSES = "addresses"
    ALL_FILES = "all_files"
    ALL_MESSAGES = "all_messages"
    CONTACT_FILES = "contact_files"
    CONTACT_MESSAGES = "contact_messages"
    CONTACT_SEARCH = "contact_search"
    DIFF_SUMMARY = "diff_summary"
    FILE_REVISIONS = "file_revisions"
    RELATED_FILES = "related_files"
    FILE_SEARCH = "file_search"
    IMAP_ACCOUNT_INFO = "imap_account_info"
    IMAP_ADD_ACCOUNT = "imap_add_account"
    IMAP_DISCOVER = "imap_discover"
    IMAP_MODIFY_ACCOUNT = "imap_modify_account"
    IMAP_REMOVE_ACCOUNT = "imap_remove_account"
    IMAP_RESET_STATUS = "imap_reset_status"
    IMAP_GET_OAUTH_PROVIDERS = "imap_get_oauth_providers"
    IMAP_SET_OAUTH_PROVIDER = "imap_set_oauth_provider"
    IMAP_DELETE_OAUTH_PROVIDER = "imap_delete_oauth_provider"
    MESSAGE_HEADERS = "message_headers"
    MESSAGE_INFO = "message_info"
    MESSAGE_TEXT = "message_text"
    SEARCH = "search"
    THREAD_INFO = "thread_info"

    @property
    def spec(self) -> ActionSpec:
        return ACTIONS[self]

    @classmethod
    def from_name(cls, name: str) -> "Action":
        """Look up an action by method name, enum name or camelCase name.

        ``all_messages``, ``ALL_MESSAGES`` and ``allMessages`` all resolve
        to ``Action.ALL_MESSAGES``.
        """
        key = name.replace("_", "").replace("-", "").lower()
        for action in cls:
            if action.value.replace("_", "") == key:
                return action
        raise InvalidInputError(f"Unknown action: {name}")


_CONTACT_PARAMS = ("email", "to", "from", "cc", "bcc", "limit")
_FILE_PARAMS = ("fileid", "filename")
_MESSAGE_PARAMS = ("emailmessageid", "from", "datesent")

ACTIONS: Dict[Action, ActionSpec] = {
    # Path typo matches the live API.
    Action.ADDRESSES: ActionSpec(
        "adresses.json",
        summary="The 20 contacts with whom the most emails were exchanged.",
    ),
    Action.ALL_FILES: ActionSpec(
        "allfiles.json",
        ("since", "limit"),
        summary="The most recent attachments found in a mailbox.",
    ),
    Action.ALL_MESSAGES: ActionSpec(
        "allmessages.json",
        ("since", "limit"),
        summary="The most recent messages indexed in a mailbox.",
    ),
    Action.CONTACT_FILES: ActionSpec(
        "contactfiles.json",
        _CONTACT_PARAMS,
        summary="Latest attachments exchanged with one or more addresses.",
    ),
    Action.CONTACT_MESSAGES: ActionSpec(
        "contactmessages.json",
        _CONTACT_PARAMS,
        summary="Messages exchanged with one or more contacts.",
    ),
    Action.CONTACT_SEARCH: ActionSpec(
        "contactsearch.json",
        ("search",),
        summary="Search the list of contacts.",
    ),
    Action.DIFF_SUMMARY: ActionSpec(
        "diffsummary.json",
        ("fileId1", "fileId2"),
        fixed={"generate": "1"},
        summary="Insertions and deletions between two files.",
    ),
    Action.FILE_REVISIONS: ActionSpec(
        "filerevisions.json",
        _FILE_PARAMS,
        summary="Revisions of a file attached to other emails.",
    ),
    Action.RELATED_FILES: ActionSpec(
        "relatedfiles.json",
        _FILE_PARAMS,
        summary="Files with names similar to the given file.",
    ),
    Action.FILE_SEARCH: ActionSpec(
        "filesearch.json",
        ("filename",),
        summary="Search attachments by file name.",
    ),
    Action.IMAP_ACCOUNT_INFO: ActionSpec(
        "imap/accountinfo.json",
        ("email", "userid"),
        scoped=False,
        summary="Information about an indexed IMAP account.",
    ),
    Action.IMAP_ADD_ACCOUNT: ActionSpec(
        "imap/addaccount.json",
        (
            "email",
            "server",
            "username",
            "oauthconsumername",
            "oauthtoken",
            "oauthtokensecret",
            "password",
            "usessl",
            "port",
            "firstname",
            "lastname",
        ),
        scoped=False,
        summary="Add an IMAP account to be indexed.",
    ),
    Action.IMAP_DISCOVER: ActionSpec(
        "imap/discover.json",
        ("email",),
        scoped=False,
        summary="Discover IMAP settings for an email address.",
    ),
    Action.IMAP_MODIFY_ACCOUNT: ActionSpec(
        "imap/modifyaccount.json",
        ("credentials", "mailboxes"),
        summary="Modify the IMAP settings of an indexed account.",
    ),
    Action.IMAP_REMOVE_ACCOUNT: ActionSpec(
        "imap/removeaccount.json",
        ("label",),
        summary="Remove the connection to an IMAP account.",
    ),
    Action.IMAP_RESET_STATUS: ActionSpec(
        "imap/resetstatus.json",
        ("label",),
        summary="Re-enable syncing of an IMAP server flagged unavailable.",
    ),
    Action.IMAP_GET_OAUTH_PROVIDERS: ActionSpec(
        "imap/oauthproviders.json",
        ("key",),
        scoped=False,
        summary="List configured OAuth providers.",
    ),
    Action.IMAP_SET_OAUTH_PROVIDER: ActionSpec(
        "imap/oauthproviders.json",
        ("type", "key", "secret"),
        scoped=False,
        summary="Add or update an OAuth provider.",
    ),
    Action.IMAP_DELETE_OAUTH_PROVIDER: ActionSpec(
        "imap/oauthproviders.json",
        ("key",),
        fixed={"action": "delete"},
        scoped=False,
        summary="Delete an OAuth provider.",
    ),
    Action.MESSAGE_HEADERS: ActionSpec(
        "messageheaders.json",
        _MESSAGE_PARAMS,
        summary="Headers of a message.",
    ),
    Action.MESSAGE_INFO: ActionSpec(
        "messageinfo.json",
        _MESSAGE_PARAMS + ("server", "mbox", "uid"),
        summary="Document and contact information about a message.",
    ),
    Action.MESSAGE_TEXT: ActionSpec(
        "messagetext.json",
        _MESSAGE_PARAMS + ("type",),
        summary="Body of a message, excluding attachments.",
    ),
    Action.SEARCH: ActionSpec(
        "search.json",
        ("subject", "limit"),
        summary="Search messages by subject.",
    ),
    Action.THREAD_INFO: ActionSpec(
        "threadinfo.json",
        ("gmailthreadid", "emailmessageid"),
        summary="Messages and contacts of an email thread.",
    ),
}
