"""
Maven POM parsing.

Turns the text of a ``pom.xml`` into a ``ProjectDescriptor``. Handles both
namespaced (``xmlns="http://maven.apache.org/POM/4.0.0"``) and plain POM
files by stripping namespaces from every tag after parsing.
"""

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Union

from pomdeps.models import (
    Activation,
    ActivationFile,
    ActivationOS,
    ActivationProperty,
    DEFAULT_DEPENDENCY_TYPE,
    Exclusion,
    ParentReference,
    Plugin,
    Profile,
    ProjectDescriptor,
    RawDependency,
)
from pomdeps.utils.exceptions import PomParseError

PROJECT_TAG = "project"


def _local_name(tag) -> str:
    """Return a tag without its ``{namespace}`` prefix."""
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _strip_namespaces(root: ET.Element) -> None:
    for el in root.iter():
        el.tag = _local_name(el.tag)


def _text(el: Optional[ET.Element], tag: str) -> str:
    """Stripped text of a direct child element, or an empty string."""
    if el is None:
        return ""
    child = el.find(tag)
    if child is not None and child.text:
        return child.text.strip()
    return ""


def _children(el: Optional[ET.Element], path: str) -> List[ET.Element]:
    if el is None:
        return []
    return el.findall(path)


def _is_true(value: str) -> bool:
    return value.strip().lower() == "true"


def _parse_properties(props_el: Optional[ET.Element]) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    if props_el is None:
        return properties
    for child in props_el:
        if not child.tag:
            continue
        value = (child.text or "").strip()
        if value:
            properties[child.tag] = value
    return properties


def _parse_dependency(dep_el: ET.Element) -> RawDependency:
    exclusions = []
    for ex in _children(dep_el, "exclusions/exclusion"):
        group_id = _text(ex, "groupId")
        artifact_id = _text(ex, "artifactId")
        if group_id or artifact_id:
            exclusions.append(Exclusion(group_id=group_id, artifact_id=artifact_id))

    return RawDependency(
        group_id=_text(dep_el, "groupId"),
        artifact_id=_text(dep_el, "artifactId"),
        version=_text(dep_el, "version"),
        scope=_text(dep_el, "scope"),
        type=_text(dep_el, "type"),
        classifier=_text(dep_el, "classifier"),
        optional=_is_true(_text(dep_el, "optional")),
        exclusions=exclusions,
    )


def _parse_dependencies(el: Optional[ET.Element], path: str = "dependencies/dependency") -> List[RawDependency]:
    return [_parse_dependency(dep_el) for dep_el in _children(el, path)]


def _parse_plugin(plugin_el: ET.Element) -> Plugin:
    return Plugin(
        group_id=_text(plugin_el, "groupId") or "org.apache.maven.plugins",
        artifact_id=_text(plugin_el, "artifactId"),
        version=_text(plugin_el, "version"),
        dependencies=_parse_dependencies(plugin_el),
    )


def _parse_activation(act_el: Optional[ET.Element]) -> Activation:
    if act_el is None:
        return Activation()

    os_el = act_el.find("os")
    prop_el = act_el.find("property")
    file_el = act_el.find("file")
    return Activation(
        active_by_default=_is_true(_text(act_el, "activeByDefault")),
        jdk=_text(act_el, "jdk"),
        os=ActivationOS(
            name=_text(os_el, "name"),
            family=_text(os_el, "family"),
            arch=_text(os_el, "arch"),
            version=_text(os_el, "version"),
        ),
        property=ActivationProperty(
            name=_text(prop_el, "name"),
            value=_text(prop_el, "value"),
        ),
        file=ActivationFile(
            exists=_text(file_el, "exists"),
            missing=_text(file_el, "missing"),
        ),
    )


def _parse_profile(profile_el: ET.Element) -> Profile:
    return Profile(
        id=_text(profile_el, "id"),
        activation=_parse_activation(profile_el.find("activation")),
        dependencies=_parse_dependencies(profile_el),
        dependency_management=_parse_dependencies(
            profile_el, "dependencyManagement/dependencies/dependency"
        ),
        properties=_parse_properties(profile_el.find("properties")),
    )


def _parse_parent(parent_el: Optional[ET.Element]) -> Optional[ParentReference]:
    if parent_el is None:
        return None
    parent = ParentReference(
        group_id=_text(parent_el, "groupId"),
        artifact_id=_text(parent_el, "artifactId"),
        version=_text(parent_el, "version"),
        relative_path=_text(parent_el, "relativePath"),
    )
    if not (parent.group_id or parent.artifact_id):
        return None
    return parent


def parse_pom(content: Union[str, bytes], path: Optional[str] = None) -> ProjectDescriptor:
    """Parse ``pom.xml`` content into a ProjectDescriptor.

    Args:
        content: Descriptor text or raw bytes.
        path: Optional path, only used in error messages.

    Returns:
        The parsed descriptor. Nothing is inherited from the parent here;
        inheritance is the resolver's job.

    Raises:
        PomParseError: If the content is not well-formed XML or its root
            element is not ``<project>``.
    """
    try:
        root = ET.fromstring(content)
    except (ET.ParseError, UnicodeError) as e:
        raise PomParseError("Malformed descriptor XML", path=path, original_exception=e) from e

    _strip_namespaces(root)
    if root.tag != PROJECT_TAG:
        raise PomParseError(f"Unexpected root element <{root.tag}>", path=path)

    build_el = root.find("build")

    return ProjectDescriptor(
        group_id=_text(root, "groupId"),
        artifact_id=_text(root, "artifactId"),
        version=_text(root, "version"),
        packaging=_text(root, "packaging") or DEFAULT_DEPENDENCY_TYPE,
        parent=_parse_parent(root.find("parent")),
        properties=_parse_properties(root.find("properties")),
        profiles=[_parse_profile(p) for p in _children(root, "profiles/profile")],
        dependency_management=_parse_dependencies(
            root, "dependencyManagement/dependencies/dependency"
        ),
        dependencies=_parse_dependencies(root),
        plugins=[_parse_plugin(p) for p in _children(build_el, "plugins/plugin")],
    )
