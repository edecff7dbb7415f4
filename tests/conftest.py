"""Pytest fixtures for contact client tests."""

import itertools

import pytest

from fullcontact.client.contact import ContactClient


class FakeTransport:
    """In-memory stand-in for `Transport` that records every call.

    Behaves like a tiny contact service: contacts are versioned by eTag and
    enrichment produces a new version.
    """

    def __init__(self):
        self.calls = []
        self.contacts = {}
        self._ids = itertools.count(1)
        self._etags = itertools.count(1)

    def _next_etag(self):
        return f"v{next(self._etags)}"

    def _record(self, method, path, params, body=None):
        self.calls.append(
            {"method": method, "path": path, "params": params, "body": body}
        )

    def get(self, path, params=None):
        self._record("GET", path, params)
        parts = path.split("/")
        list_id, contact_id = parts[1], parts[2]
        versions = self.contacts[(list_id, contact_id)]
        action = parts[3] if len(parts) > 3 else None

        if action is None:
            etag = (params or {}).get("eTag")
            if etag is None:
                return dict(versions[-1])
            return dict(next(v for v in versions if v["eTag"] == etag))
        if action == "hasUpdates":
            etag = (params or {}).get("eTag", versions[-1]["eTag"])
            return {"hasUpdates": etag != versions[-1]["eTag"]}
        if action == "history":
            history = [
                {"eTag": v["eTag"], "actionType": v["actionType"]} for v in versions
            ]
            action_type = (params or {}).get("actionType")
            if action_type:
                history = [h for h in history if h["actionType"] == action_type]
            return {"history": history}
        return {"action": action, "contact": dict(versions[-1])}

    def post(self, path, params=None, body=None):
        self._record("POST", path, params, body)
        parts = path.split("/")
        list_id = parts[1]

        if len(parts) == 2:
            contact_id = str(body.get("id") or f"c{next(self._ids)}")
            versions = self.contacts.setdefault((list_id, contact_id), [])
            contact = dict(body)
            contact.update(
                id=contact_id,
                eTag=self._next_etag(),
                actionType="Updated" if versions else "Added",
            )
            versions.append(contact)
            return dict(contact)

        contact_id = parts[2]
        versions = self.contacts[(list_id, contact_id)]
        enriched = dict(versions[-1])
        enriched.update(eTag=self._next_etag(), actionType="Enriched")
        versions.append(enriched)
        return {"status": 200}

    def delete(self, path, params=None):
        self._record("DELETE", path, params)
        parts = path.split("/")
        self.contacts.pop((parts[1], parts[2]), None)
        return {}


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return ContactClient(transport=transport)
