"""
CycloneDX export of dependency records.

Builds a CycloneDX 1.6 JSON document with one library component per
record, identified by a ``pkg:maven/<groupId>/<artifactId>@<version>``
package URL.
"""
import logging
from typing import Iterable, Optional

from cyclonedx.builder.this import this_component as cdx_lib_component
from cyclonedx.exception import MissingOptionalDependencyException
from cyclonedx.model import Property
from cyclonedx.model.bom import Bom
from cyclonedx.model.component import Component, ComponentType
from cyclonedx.output.json import JsonV1Dot6
from cyclonedx.schema import SchemaVersion
from cyclonedx.validation.json import JsonStrictValidator
from packageurl import PackageURL

from pomdeps.maven.properties import UNCONSTRAINED_VERSION, has_unresolved_placeholder
from pomdeps.models import DependencyRecord
from pomdeps.utils.exceptions import PomDepsError

logger = logging.getLogger(__name__)

PROPERTY_PREFIX = "pomdeps"


def _get_purl_type(ecosystem: str) -> str:
    """Map ecosystem name to PackageURL type."""
    ecosystem_to_purl = {
        "maven": "maven",
        "java": "maven",
        "npm": "npm",
        "python": "pypi",
        "golang": "golang",
        "cargo": "cargo",
        "ruby": "gem",
    }
    return ecosystem_to_purl.get(ecosystem.lower(), "generic")


def _known_version(version: str) -> Optional[str]:
    """A concrete version, or ``None`` for ``latest`` and unresolved placeholders."""
    if not version or version == UNCONSTRAINED_VERSION or has_unresolved_placeholder(version):
        return None
    return version


def record_to_component(record: DependencyRecord) -> Component:
    """Convert one record into a CycloneDX library component."""
    if ":" in record.name:
        namespace, name = record.name.split(":", 1)
    else:
        namespace, name = None, record.name
    version = _known_version(record.version)

    properties = [Property(name=f"{PROPERTY_PREFIX}:scope", value=record.scope)]
    if version is None:
        properties.append(Property(name=f"{PROPERTY_PREFIX}:declared-version", value=record.version))
    for key, value in sorted(record.metadata.items()):
        if isinstance(value, bool):
            value = str(value).lower()
        elif isinstance(value, list):
            value = ",".join(value)
        properties.append(Property(name=f"{PROPERTY_PREFIX}:{key}", value=str(value)))

    return Component(
        name=name,
        group=namespace,
        version=version,
        type=ComponentType.LIBRARY,
        purl=PackageURL(type=_get_purl_type(record.type), namespace=namespace, name=name, version=version),
        properties=properties,
    )


def build_bom(records: Iterable[DependencyRecord]) -> Bom:
    bom = Bom()
    bom.metadata.tools.components.add(cdx_lib_component())
    for record in records:
        bom.components.add(record_to_component(record))
    return bom


def validate_json_format(sbom: JsonV1Dot6) -> None:
    """Validate serialized output against the CycloneDX 1.6 schema."""
    serialized_json = sbom.output_as_string(indent=2)
    validator = JsonStrictValidator(SchemaVersion.V1_6)
    try:
        errors = validator.validate_str(serialized_json)
    except MissingOptionalDependencyException as error:
        logger.debug(f"JSON validation was skipped: {error}")
        return
    if errors:
        raise PomDepsError(f"Generated CycloneDX document is invalid: {errors!r}")


def generate(records: Iterable[DependencyRecord], validate: bool = True) -> str:
    """Render records as a CycloneDX JSON document string."""
    sbom = JsonV1Dot6(bom=build_bom(records))
    if validate:
        validate_json_format(sbom)
    return sbom.output_as_string(indent=2)
