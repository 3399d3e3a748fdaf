"""
Bundle resource.

A container for a collection of resources. ``entry.resource``,
``entry.response.outcome`` and ``issues`` hold resources of any type and are
dispatched on their own ``resourceType``.
"""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Code,
    Decimal,
    Identifier,
    Instant,
    Resource,
    Signature,
    String,
    UnsignedInt,
    Uri,
)
from fhir_r5.resources.operation_outcome import OperationOutcome


class BundleType(str, Enum):
    DOCUMENT = "document"
    MESSAGE = "message"
    TRANSACTION = "transaction"
    TRANSACTION_RESPONSE = "transaction-response"
    BATCH = "batch"
    BATCH_RESPONSE = "batch-response"
    HISTORY = "history"
    SEARCHSET = "searchset"
    COLLECTION = "collection"
    SUBSCRIPTION_NOTIFICATION = "subscription-notification"


class SearchEntryMode(str, Enum):
    MATCH = "match"
    INCLUDE = "include"
    OUTCOME = "outcome"


class HTTPVerb(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class BundleLink(BackboneElement):
    relation: Code
    url: Uri


class BundleEntrySearch(BackboneElement):
    mode: Annotated[Code | None, Binding(SearchEntryMode)] = None
    score: Decimal | None = None


class BundleEntryRequest(BackboneElement):
    """Transaction/batch instruction for one entry."""

    method: Annotated[Code, Binding(HTTPVerb)]
    url: Uri
    if_none_match: String | None = None
    if_modified_since: Instant | None = None
    if_match: String | None = None
    if_none_exist: String | None = None


class BundleEntryResponse(BackboneElement):
    status: String
    location: Uri | None = None
    etag: String | None = None
    last_modified: Instant | None = None
    outcome: Resource | None = None


class BundleEntry(BackboneElement):
    link: list[BundleLink] | None = None
    full_url: Uri | None = None
    resource: Resource | None = None
    search: BundleEntrySearch | None = None
    request: BundleEntryRequest | None = None
    response: BundleEntryResponse | None = None


class Bundle(Resource):
    """Contains a collection of resources."""

    resource_type: ClassVar[str] = "Bundle"

    identifier: Identifier | None = None
    type: Annotated[Code, Binding(BundleType)]
    timestamp: Instant | None = None
    total: UnsignedInt | None = None
    link: list[BundleLink] | None = None
    entry: list[BundleEntry] | None = None
    signature: Signature | None = None
    issues: OperationOutcome | None = None
