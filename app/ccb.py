from __future__ import annotations

import json
import logging
from xml.etree import ElementTree

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as SafeET

from .client import CCBClient
from .errors import MalformedRemoteResponse, Result, WhoIsError
from .models import Envelope
from .names import NameSplitPolicy, build_search_params
from .utils import JSONRecord, decode_element, record_to_dict

logger = logging.getLogger(__name__)

ROOT_TAG = "ccb_api"


def placeholder_body() -> bytes:
    """Request body sent with the search: an empty envelope."""
    return ElementTree.tostring(ElementTree.Element(ROOT_TAG))


def parse_individual_search(payload: bytes | str) -> Result[Envelope]:
    """Decode an individual_search XML response into an Envelope."""
    try:
        root = SafeET.fromstring(payload)
    except (ElementTree.ParseError, DefusedXmlException) as e:
        logger.warning("Could not parse CCB response: %s", e)
        return Result.fail(MalformedRemoteResponse(str(e)))
    if root.tag != ROOT_TAG:
        logger.warning("Unexpected CCB response root <%s>", root.tag)
        return Result.fail(MalformedRemoteResponse(f"unexpected root element <{root.tag}>"))
    return Result.ok(decode_element(Envelope, root))


def envelope_to_dict(envelope: Envelope) -> JSONRecord:
    return record_to_dict(envelope)


def envelope_to_json(envelope: Envelope) -> str:
    return json.dumps(envelope_to_dict(envelope))


class WhoIsService:
    """Name -> CCB search -> JSON pipeline behind the WhoIs endpoint.

    With ``surface_errors`` off, transport and parse failures are only logged
    and the JSON of whatever was decoded (possibly an empty envelope) is
    returned.
    """

    def __init__(
        self,
        client: CCBClient,
        policy: NameSplitPolicy = NameSplitPolicy.FIRST_TOKEN,
        surface_errors: bool = True,
    ):
        self.client = client
        self.policy = policy
        self.surface_errors = surface_errors

    async def who_is(self, name: str | None) -> str:
        params = build_search_params(name, self.policy)
        fetched = await self.client.search_individuals(params, placeholder_body())

        envelope = Envelope()
        failure: WhoIsError | None = fetched.error
        if fetched.success:
            parsed = parse_individual_search(fetched.unwrap())
            if parsed.success:
                envelope = parsed.unwrap()
            failure = parsed.error

        if failure is not None and self.surface_errors:
            raise failure
        return envelope_to_json(envelope)


__all__ = [
    "NameSplitPolicy",
    "build_search_params",
    "placeholder_body",
    "parse_individual_search",
    "envelope_to_dict",
    "envelope_to_json",
    "WhoIsService",
]
