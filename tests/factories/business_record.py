"""Factories for business record request bodies.

Bodies are built as camelCase dicts, the way API clients send them.
"""

from polyfactory.factories.pydantic_factory import ModelFactory
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LeadPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_name: str
    primary_contact_name: str
    primary_contact_email: str
    city: str
    lead_source: str


class BusinessRecordPayload(LeadPayload):
    record_type: str


class LeadPayloadFactory(ModelFactory[LeadPayload]):
    """Body for ``POST /leads``; call ``.build().model_dump(by_alias=True)``."""

    __model__ = LeadPayload

    @classmethod
    def company_name(cls) -> str:
        return cls.__faker__.company()

    @classmethod
    def primary_contact_name(cls) -> str:
        return cls.__faker__.name()

    @classmethod
    def primary_contact_email(cls) -> str:
        return cls.__faker__.company_email()

    @classmethod
    def city(cls) -> str:
        return cls.__faker__.city()

    @classmethod
    def lead_source(cls) -> str:
        return "website"


class BusinessRecordPayloadFactory(LeadPayloadFactory):
    """Body for ``POST /business-records``; a customer unless told otherwise."""

    __model__ = BusinessRecordPayload

    @classmethod
    def record_type(cls) -> str:
        return "customer"
