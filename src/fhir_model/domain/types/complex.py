"""Complex data types shared by resource definitions."""

from __future__ import annotations

from fhir_model.domain import validation
from fhir_model.domain.base import choice, model, optional, repeated, required
from fhir_model.domain.exceptions import InvalidValueError
from fhir_model.domain.types.codes import IdentifierUse, NarrativeStatus, QuantityComparator
from fhir_model.domain.types.element import Element
from fhir_model.domain.types.primitives import (
    Boolean,
    Canonical,
    Code,
    Date,
    DateTime,
    Decimal,
    Id,
    Instant,
    Integer,
    Markdown,
    String,
    UnsignedInt,
    Uri,
    Url,
)


@model
class Coding(Element):
    system: Uri | None = optional(Uri)
    version: String | None = optional(String)
    code: Code | None = optional(Code)
    display: String | None = optional(String)
    user_selected: Boolean | None = optional(Boolean)


@model
class CodeableConcept(Element):
    coding: tuple[Coding, ...] = repeated(Coding)
    text: String | None = optional(String)


@model
class Period(Element):
    start: DateTime | None = optional(DateTime)
    end: DateTime | None = optional(DateTime)


@model
class Identifier(Element):
    use: IdentifierUse | None = optional(IdentifierUse)
    type: CodeableConcept | None = optional(CodeableConcept)
    system: Uri | None = optional(Uri)
    value: String | None = optional(String)
    period: Period | None = optional(Period)
    assigner: Reference | None = optional("Reference", targets=("Organization",))


@model
class Reference(Element):
    """A logical link to another resource.

    References are never resolved in memory; the target is identified by a
    literal reference ("Patient/123"), a logical identifier, or both.
    """

    reference: String | None = optional(String)
    type: Uri | None = optional(Uri)
    identifier: Identifier | None = optional(Identifier)
    display: String | None = optional(String)


@model
class Quantity(Element):
    value: Decimal | None = optional(Decimal)
    comparator: QuantityComparator | None = optional(QuantityComparator)
    unit: String | None = optional(String)
    system: Uri | None = optional(Uri)
    code: Code | None = optional(Code)


@model
class Money(Element):
    value: Decimal | None = optional(Decimal)
    currency: Code | None = optional(Code)


@model
class Attachment(Element):
    content_type: Code | None = optional(Code)
    language: Code | None = optional(Code)
    url: Url | None = optional(Url)
    size: UnsignedInt | None = optional(UnsignedInt)
    title: String | None = optional(String)
    creation: DateTime | None = optional(DateTime)


@model
class Annotation(Element):
    author: Reference | String | None = choice(
        Reference,
        String,
        targets=("Practitioner", "Patient", "RelatedPerson", "Organization"),
    )
    time: DateTime | None = optional(DateTime)
    text: Markdown = required(Markdown)


@model
class Timing(Element):
    """Occurrences of an event.

    Only explicit event times and a code are modelled; the repeat rule
    (Timing.repeat) is not.
    """

    event: tuple[DateTime, ...] = repeated(DateTime)
    code: CodeableConcept | None = optional(CodeableConcept)


@model
class Meta(Element):
    version_id: Id | None = optional(Id)
    last_updated: Instant | None = optional(Instant)
    source: Uri | None = optional(Uri)
    profile: tuple[Canonical, ...] = repeated(Canonical)
    security: tuple[Coding, ...] = repeated(Coding)
    tag: tuple[Coding, ...] = repeated(Coding)


@model
class Narrative(Element):
    status: NarrativeStatus = required(NarrativeStatus)
    div: str = required(str)

    def _validate(self) -> None:
        validation.check_string(self.div)
        if not self.div.lstrip().startswith("<div"):
            raise InvalidValueError("Narrative.div must be an XHTML <div> element")
        super()._validate()


@model
class Extension(Element):
    """Additional content defined by an extension definition.

    An extension carries either a value or nested extensions, never neither.
    """

    url: str = required(str)
    value: Element | None = choice(
        Boolean,
        Code,
        Date,
        DateTime,
        Decimal,
        Instant,
        Integer,
        Markdown,
        String,
        Uri,
        Attachment,
        CodeableConcept,
        Coding,
        Identifier,
        Money,
        Period,
        Quantity,
        Reference,
    )

    def _validate(self) -> None:
        validation.check_uri(self.url)
        super()._validate()
