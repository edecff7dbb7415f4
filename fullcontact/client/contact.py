"""Contact-list operations over the FullContact REST API.

Architectural role:
    One method per endpoint under `contactLists/`. Each method builds the
    resource path and query/body parameters and delegates to the transport.

Request shaping:
    - Ids are only used to build the path; they are not validated or escaped.
    - Optional query options are omitted when `None` and forwarded verbatim
      otherwise (booleans as `true`/`false`).
    - Only `create_or_update_contact` sends a body; its flags go in the query.

Failure handling model:
    Nothing is caught here. Transport errors (`requests.HTTPError` for
    not-found, malformed payload or authorization failures) reach the caller
    unchanged, and no call is retried.
"""

from fullcontact.client.transport import Transport
from fullcontact.client.types import build_params


class ContactClient:
    """Stateless facade for contact create/read/delete, enrichment and history."""

    def __init__(self, transport: Transport | None = None) -> None:
        self.transport = transport or Transport()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        """Release the transport's connection pool."""
        self.transport.close()

    @staticmethod
    def _contact_path(list_id, contact_id, *suffix) -> str:
        return "/".join(["contactLists", str(list_id), str(contact_id), *suffix])

    def create_or_update_contact(
        self,
        list_id,
        contact_data: dict,
        generate_ids: int | None = None,
        queue: bool | None = None,
    ):
        """Create or modify a contact in a list.

        Args:
            list_id: Contact list receiving the contact.
            contact_data: Contact record in POCO format, sent as the JSON body.
            generate_ids: `0`/`1`, whether the service generates ids
                (service default `0`).
            queue: Whether the service checks for updates on creation
                (service default `False`).

        Returns:
            The created or updated contact representation.
        """
        params = build_params(generateIds=generate_ids, queue=queue)
        return self.transport.post(
            f"contactLists/{list_id}", params=params, body=contact_data
        )

    def get_contact(self, list_id, contact_id, etag: str | None = None):
        """Fetch a contact, optionally pinned to the version `etag`."""
        return self.transport.get(
            self._contact_path(list_id, contact_id), params=build_params(eTag=etag)
        )

    def delete_contact(self, list_id, contact_id):
        """Remove a contact from its list."""
        return self.transport.delete(self._contact_path(list_id, contact_id))

    def has_enriched_updates(self, list_id, contact_id, etag: str | None = None):
        """Check whether enrichment data newer than `etag` exists.

        Returns:
            Response carrying a boolean `hasUpdates` field.
        """
        return self.transport.get(
            self._contact_path(list_id, contact_id, "hasUpdates"),
            params=build_params(eTag=etag),
        )

    def get_updates(self, list_id, contact_id):
        """Fetch the pending update set for a contact."""
        return self.transport.get(self._contact_path(list_id, contact_id, "updates"))

    def get_enriched_contact(self, list_id, contact_id):
        return self.transport.get(self._contact_path(list_id, contact_id, "enriched"))

    def save_enriched_contact(self, list_id, contact_id):
        """Persist the enriched version as the contact's canonical record."""
        return self.transport.post(self._contact_path(list_id, contact_id, "enriched"))

    def get_contact_history(self, list_id, contact_id, action_type=None):
        """Fetch the contact's eTag history.

        Args:
            action_type: Optional `ActionType` (or plain string) filter.

        Returns:
            Response whose `history` lists eTags with their action types.
        """
        return self.transport.get(
            self._contact_path(list_id, contact_id, "history"),
            params=build_params(actionType=action_type),
        )
