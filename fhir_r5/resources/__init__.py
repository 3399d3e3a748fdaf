"""Concrete FHIR R5 resource types."""

from fhir_r5.resources.account import Account
from fhir_r5.resources.activity_definition import ActivityDefinition
from fhir_r5.resources.allergy_intolerance import AllergyIntolerance
from fhir_r5.resources.appointment import Appointment
from fhir_r5.resources.appointment_response import AppointmentResponse
from fhir_r5.resources.audit_event import AuditEvent
from fhir_r5.resources.basic import Basic
from fhir_r5.resources.binary import Binary
from fhir_r5.resources.body_structure import BodyStructure
from fhir_r5.resources.bundle import Bundle
from fhir_r5.resources.capability_statement import CapabilityStatement
from fhir_r5.resources.care_plan import CarePlan
from fhir_r5.resources.care_team import CareTeam
from fhir_r5.resources.clinical_impression import ClinicalImpression
from fhir_r5.resources.code_system import CodeSystem
from fhir_r5.resources.communication import Communication
from fhir_r5.resources.communication_request import CommunicationRequest
from fhir_r5.resources.compartment_definition import CompartmentDefinition
from fhir_r5.resources.composition import Composition
from fhir_r5.resources.concept_map import ConceptMap
from fhir_r5.resources.condition import Condition
from fhir_r5.resources.consent import Consent
from fhir_r5.resources.coverage import Coverage
from fhir_r5.resources.detected_issue import DetectedIssue
from fhir_r5.resources.device import Device
from fhir_r5.resources.diagnostic_report import DiagnosticReport
from fhir_r5.resources.document_reference import DocumentReference
from fhir_r5.resources.encounter import Encounter
from fhir_r5.resources.endpoint import Endpoint
from fhir_r5.resources.episode_of_care import EpisodeOfCare
from fhir_r5.resources.evidence_report import EvidenceReport
from fhir_r5.resources.family_member_history import FamilyMemberHistory
from fhir_r5.resources.flag import Flag
from fhir_r5.resources.goal import Goal
from fhir_r5.resources.graph_definition import GraphDefinition
from fhir_r5.resources.group import Group
from fhir_r5.resources.guidance_response import GuidanceResponse
from fhir_r5.resources.healthcare_service import HealthcareService
from fhir_r5.resources.imaging_study import ImagingStudy
from fhir_r5.resources.immunization import Immunization
from fhir_r5.resources.implementation_guide import ImplementationGuide
from fhir_r5.resources.library import Library
from fhir_r5.resources.linkage import Linkage
from fhir_r5.resources.list import List
from fhir_r5.resources.location import Location
from fhir_r5.resources.measure import Measure
from fhir_r5.resources.measure_report import MeasureReport
from fhir_r5.resources.medication import Medication
from fhir_r5.resources.medication_administration import MedicationAdministration
from fhir_r5.resources.medication_dispense import MedicationDispense
from fhir_r5.resources.medication_request import MedicationRequest
from fhir_r5.resources.medication_statement import MedicationStatement
from fhir_r5.resources.message_header import MessageHeader
from fhir_r5.resources.naming_system import NamingSystem
from fhir_r5.resources.observation import Observation
from fhir_r5.resources.operation_definition import OperationDefinition
from fhir_r5.resources.operation_outcome import OperationOutcome
from fhir_r5.resources.organization import Organization
from fhir_r5.resources.organization_affiliation import OrganizationAffiliation
from fhir_r5.resources.packaged_product_definition import PackagedProductDefinition
from fhir_r5.resources.parameters import Parameters
from fhir_r5.resources.patient import Patient
from fhir_r5.resources.person import Person
from fhir_r5.resources.plan_definition import PlanDefinition
from fhir_r5.resources.practitioner import Practitioner
from fhir_r5.resources.practitioner_role import PractitionerRole
from fhir_r5.resources.procedure import Procedure
from fhir_r5.resources.provenance import Provenance
from fhir_r5.resources.questionnaire import Questionnaire
from fhir_r5.resources.questionnaire_response import QuestionnaireResponse
from fhir_r5.resources.related_person import RelatedPerson
from fhir_r5.resources.risk_assessment import RiskAssessment
from fhir_r5.resources.schedule import Schedule
from fhir_r5.resources.search_parameter import SearchParameter
from fhir_r5.resources.service_request import ServiceRequest
from fhir_r5.resources.slot import Slot
from fhir_r5.resources.specimen import Specimen
from fhir_r5.resources.task import Task
from fhir_r5.resources.transport import Transport
from fhir_r5.resources.value_set import ValueSet

__all__ = [
    "Account",
    "ActivityDefinition",
    "AllergyIntolerance",
    "Appointment",
    "AppointmentResponse",
    "AuditEvent",
    "Basic",
    "Binary",
    "BodyStructure",
    "Bundle",
    "CapabilityStatement",
    "CarePlan",
    "CareTeam",
    "ClinicalImpression",
    "CodeSystem",
    "Communication",
    "CommunicationRequest",
    "CompartmentDefinition",
    "Composition",
    "ConceptMap",
    "Condition",
    "Consent",
    "Coverage",
    "DetectedIssue",
    "Device",
    "DiagnosticReport",
    "DocumentReference",
    "Encounter",
    "Endpoint",
    "EpisodeOfCare",
    "EvidenceReport",
    "FamilyMemberHistory",
    "Flag",
    "Goal",
    "GraphDefinition",
    "Group",
    "GuidanceResponse",
    "HealthcareService",
    "ImagingStudy",
    "Immunization",
    "ImplementationGuide",
    "Library",
    "Linkage",
    "List",
    "Location",
    "Measure",
    "MeasureReport",
    "Medication",
    "MedicationAdministration",
    "MedicationDispense",
    "MedicationRequest",
    "MedicationStatement",
    "MessageHeader",
    "NamingSystem",
    "Observation",
    "OperationDefinition",
    "OperationOutcome",
    "Organization",
    "OrganizationAffiliation",
    "PackagedProductDefinition",
    "Parameters",
    "Patient",
    "Person",
    "PlanDefinition",
    "Practitioner",
    "PractitionerRole",
    "Procedure",
    "Provenance",
    "Questionnaire",
    "QuestionnaireResponse",
    "RelatedPerson",
    "RiskAssessment",
    "Schedule",
    "SearchParameter",
    "ServiceRequest",
    "Slot",
    "Specimen",
    "Task",
    "Transport",
    "ValueSet",
]
