from dataclasses import dataclass
from typing import List, Optional

from .utils import attribute, record, reference, sequence, text


@dataclass
class Argument:
    name: Optional[str] = attribute()
    value: Optional[str] = attribute()


@dataclass
class Request:
    parameters: Optional[List[Argument]] = sequence(Argument, item="argument")


@dataclass
class Address:
    type: Optional[str] = attribute()
    street_address: Optional[str] = text()
    city: Optional[str] = text()
    state: Optional[str] = text()
    zip: Optional[str] = text()
    country: Optional[str] = reference(attr="code")
    line_1: Optional[str] = text()
    line_2: Optional[str] = text()
    latitude: Optional[str] = text()
    longitude: Optional[str] = text()


@dataclass
class Phone:
    type: Optional[str] = attribute()


@dataclass
class PrivacySettings:
    """Visibility flags; each one keeps only the id of the referenced level."""

    profile_listed: Optional[str] = text()
    mailing_address: Optional[str] = reference()
    home_address: Optional[str] = reference()
    home_phone: Optional[str] = reference()
    work_phone: Optional[str] = reference()
    mobile_phone: Optional[str] = reference()
    emergency_phone: Optional[str] = reference()
    birthday: Optional[str] = reference()
    anniversary: Optional[str] = reference()
    gender: Optional[str] = reference()
    marital_status: Optional[str] = reference()
    user_defined_fields: Optional[str] = reference()
    allergies: Optional[str] = reference()


@dataclass
class Individual:
    id: Optional[str] = attribute()
    sync_id: Optional[str] = text()
    other_id: Optional[str] = text()
    giving_number: Optional[str] = text()
    campus: Optional[str] = reference()
    family: Optional[str] = reference()
    family_image: Optional[str] = text()
    family_position: Optional[str] = text()
    family_members: Optional[str] = text()
    first_name: Optional[str] = text()
    last_name: Optional[str] = text()
    middle_name: Optional[str] = text()
    legal_first_name: Optional[str] = text()
    full_name: Optional[str] = text()
    salutation: Optional[str] = text()
    suffix: Optional[str] = text()
    image: Optional[str] = text()
    email: Optional[str] = text()
    allergies: Optional[str] = text()
    confirmed_no_allergies: Optional[str] = text()
    addresses: Optional[List[Address]] = sequence(Address, item="address")
    phones: Optional[List[Phone]] = sequence(Phone, item="phone")
    mobile_carrier: Optional[str] = reference()
    gender: Optional[str] = text()
    marital_status: Optional[str] = text()
    birthday: Optional[str] = text()
    anniversary: Optional[str] = text()
    baptized: Optional[str] = text()
    deceased: Optional[str] = text()
    membership_type: Optional[str] = reference()
    membership_date: Optional[str] = text()
    membership_end: Optional[str] = text()
    receive_email_from_church: Optional[str] = text()
    default_new_group_messages: Optional[str] = text()
    default_new_group_comments: Optional[str] = text()
    default_new_group_digest: Optional[str] = text()
    default_new_group_sms: Optional[str] = text()
    privacy_settings: Optional[PrivacySettings] = record(PrivacySettings)
    active: Optional[str] = text()
    creator: Optional[str] = reference()
    modifier: Optional[str] = reference()
    created: Optional[str] = text()
    modified: Optional[str] = text()
    user_defined_text_fields: Optional[str] = text()
    user_defined_date_fields: Optional[str] = text()
    user_defined_pulldown_fields: Optional[str] = text()


@dataclass
class Individuals:
    count: Optional[str] = attribute()
    # Only the first <individual> is kept.
    individual: Optional[Individual] = record(Individual)


@dataclass
class Response:
    service: Optional[str] = text()
    service_action: Optional[str] = text()
    availability: Optional[str] = text()
    individuals: Optional[Individuals] = record(Individuals)


@dataclass
class Envelope:
    """Root ``<ccb_api>`` element of an individual_search response."""

    request: Optional[Request] = record(Request)
    response: Optional[Response] = record(Response)
