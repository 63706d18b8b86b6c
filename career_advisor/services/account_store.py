"""
Account Store - CRUD for the `users` collection.

One document per account holds the credentials and the whole profile
(academics, interests, university applications). Emails are stored
lowercased and a unique index on `email` makes the database itself reject
a second account with the same address.

The password hash and the chat history are excluded from every read unless
the caller asks for the hash explicitly (login is the only caller that does).
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

logger = logging.getLogger(__name__)

SECRET_FIELD = "password"
HIDDEN_FIELDS = (SECRET_FIELD, "chatHistory")


class DuplicateEmail(Exception):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to a JSON-friendly dict with a string `id`."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


class AccountStore:
    """Owns account records. Never sees a plaintext password."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def ensure_indexes(self) -> None:
        """Create the unique email index. Call once during app startup."""
        self.collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
        logger.info("Indexes ensured on %s", self.collection.name)

    def _projection(self, include_secret: bool = False) -> dict:
        hidden = [f for f in HIDDEN_FIELDS if not (include_secret and f == SECRET_FIELD)]
        return {field: 0 for field in hidden}

    def create(self, email: str, hashed_secret: str, profile_fields: Optional[dict] = None) -> dict:
        """
        Insert a new account.

        Args:
            email: Address as entered; normalized before storage
            hashed_secret: Output of PasswordHasher.hash
            profile_fields: camelCase profile fields (firstName, lastName, ...)

        Returns:
            Public projection of the stored account (no password)

        Raises:
            DuplicateEmail: an account with this email already exists
        """
        now = datetime.now(timezone.utc)
        doc = dict(profile_fields or {})
        doc.update({
            "email": normalize_email(email),
            SECRET_FIELD: hashed_secret,
            "chatHistory": [],
            "createdAt": now,
            "updatedAt": now,
        })
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateEmail(doc["email"])

        doc["_id"] = result.inserted_id
        for field in HIDDEN_FIELDS:
            doc.pop(field, None)
        return serialize_doc(doc)

    def find_by_email(self, email: str, include_secret: bool = False) -> Optional[dict]:
        doc = self.collection.find_one(
            {"email": normalize_email(email)},
            self._projection(include_secret)
        )
        return serialize_doc(doc)

    def find_by_id(self, account_id: str) -> Optional[dict]:
        if not ObjectId.is_valid(account_id):
            return None
        doc = self.collection.find_one({"_id": ObjectId(account_id)}, self._projection())
        return serialize_doc(doc)
