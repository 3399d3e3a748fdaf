"""
PlanDefinition resource.

Actions nest through ``PlanDefinitionAction.action``.
"""

from typing import Annotated, ClassVar

from fhir_r5.models import (
    Age,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    CodeableReference,
    Coding,
    ContactDetail,
    DataRequirement,
    Date,
    DateTime,
    DomainResource,
    Duration,
    Expression,
    Id,
    Identifier,
    Integer,
    Markdown,
    Period,
    Quantity,
    Range,
    Ratio,
    Reference,
    RelatedArtifact,
    String,
    Timing,
    TriggerDefinition,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import (
    ActionCardinalityBehavior,
    ActionConditionKind,
    ActionGroupingBehavior,
    ActionParticipantType,
    ActionPrecheckBehavior,
    ActionRelationshipType,
    ActionRequiredBehavior,
    ActionSelectionBehavior,
    PublicationStatus,
)


class PlanDefinitionGoalTarget(BackboneElement):
    measure: CodeableConcept | None = None
    detail: Quantity | Range | CodeableConcept | String | Boolean | Integer | Ratio | None = None
    due: Duration | None = None


class PlanDefinitionGoal(BackboneElement):
    category: CodeableConcept | None = None
    description: CodeableConcept
    priority: CodeableConcept | None = None
    start: CodeableConcept | None = None
    addresses: list[CodeableConcept] | None = None
    documentation: list[RelatedArtifact] | None = None
    target: list[PlanDefinitionGoalTarget] | None = None


class PlanDefinitionActorOption(BackboneElement):
    type: Annotated[Code | None, Binding(ActionParticipantType)] = None
    type_canonical: Canonical | None = None
    type_reference: Reference | None = None
    role: CodeableConcept | None = None


class PlanDefinitionActor(BackboneElement):
    title: String | None = None
    description: Markdown | None = None
    option: list[PlanDefinitionActorOption]


class PlanDefinitionActionCondition(BackboneElement):
    kind: Annotated[Code, Binding(ActionConditionKind)]
    expression: Expression | None = None


class PlanDefinitionActionInput(BackboneElement):
    """Input data requirement; the same shape describes outputs."""

    title: String | None = None
    requirement: DataRequirement | None = None
    related_data: Id | None = None


class PlanDefinitionActionRelatedAction(BackboneElement):
    target_id: Id
    relationship: Annotated[Code, Binding(ActionRelationshipType)]
    end_relationship: Annotated[Code | None, Binding(ActionRelationshipType)] = None
    offset: Duration | Range | None = None


class PlanDefinitionActionParticipant(BackboneElement):
    actor_id: String | None = None
    type: Annotated[Code | None, Binding(ActionParticipantType)] = None
    type_canonical: Canonical | None = None
    type_reference: Reference | None = None
    role: CodeableConcept | None = None
    function: CodeableConcept | None = None


class PlanDefinitionActionDynamicValue(BackboneElement):
    path: String | None = None
    expression: Expression | None = None


class PlanDefinitionAction(BackboneElement):
    link_id: String | None = None
    prefix: String | None = None
    title: String | None = None
    description: Markdown | None = None
    text_equivalent: Markdown | None = None
    priority: CodeableConcept | None = None
    code: CodeableConcept | None = None
    reason: list[CodeableConcept] | None = None
    documentation: list[RelatedArtifact] | None = None
    goal_id: list[Id] | None = None
    subject: CodeableConcept | Reference | Canonical | None = None
    trigger: list[TriggerDefinition] | None = None
    condition: list[PlanDefinitionActionCondition] | None = None
    input: list[PlanDefinitionActionInput] | None = None
    output: list[PlanDefinitionActionInput] | None = None
    related_action: list[PlanDefinitionActionRelatedAction] | None = None
    timing: Age | Duration | Range | Timing | None = None
    location: CodeableReference | None = None
    participant: list[PlanDefinitionActionParticipant] | None = None
    type: CodeableConcept | None = None
    grouping_behavior: Annotated[Code | None, Binding(ActionGroupingBehavior)] = None
    selection_behavior: Annotated[Code | None, Binding(ActionSelectionBehavior)] = None
    required_behavior: Annotated[Code | None, Binding(ActionRequiredBehavior)] = None
    precheck_behavior: Annotated[Code | None, Binding(ActionPrecheckBehavior)] = None
    cardinality_behavior: Annotated[Code | None, Binding(ActionCardinalityBehavior)] = None
    definition: Canonical | Uri | None = None
    transform: Canonical | None = None
    dynamic_value: list[PlanDefinitionActionDynamicValue] | None = None
    action: list["PlanDefinitionAction"] | None = None


class PlanDefinition(DomainResource):
    """A pre-defined group of actions to be taken in particular circumstances."""

    resource_type: ClassVar[str] = "PlanDefinition"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    subtitle: String | None = None
    type: CodeableConcept | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    subject: CodeableConcept | Reference | Canonical | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    usage: Markdown | None = None
    copyright: Markdown | None = None
    copyright_label: String | None = None
    approval_date: Date | None = None
    last_review_date: Date | None = None
    effective_period: Period | None = None
    topic: list[CodeableConcept] | None = None
    author: list[ContactDetail] | None = None
    editor: list[ContactDetail] | None = None
    reviewer: list[ContactDetail] | None = None
    endorser: list[ContactDetail] | None = None
    related_artifact: list[RelatedArtifact] | None = None
    library: list[Canonical] | None = None
    goal: list[PlanDefinitionGoal] | None = None
    actor: list[PlanDefinitionActor] | None = None
    action: list[PlanDefinitionAction] | None = None
    as_needed: Boolean | CodeableConcept | None = None


PlanDefinitionAction.model_rebuild()
