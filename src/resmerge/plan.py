"""Merge plans: which resource groups to copy and which XML files to splice.

A plan is a YAML document::

    source: patches/resources
    groups:
      - directory: drawable
        resources: [icon.png, banner.png]
    xml:
      - directory: patches/host
        file: values/strings.xml
        tag: resources
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ruamel.yaml import YAML

from resmerge.errors import MergePlanError
from resmerge.resources.context import ResourceContext
from resmerge.resources.copy import copy_resources
from resmerge.resources.embedded import EmbeddedResourceSource
from resmerge.resources.groups import ResourceGroup
from resmerge.xmlmerge.merge import merge_xml_resource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XmlMerge:
    """One XML splice: ``resource_directory/target_resource`` into ``res/target_resource``."""

    resource_directory: str
    target_resource: str
    tag: str


@dataclass
class MergePlan:
    source_resource_directory: str = ""
    groups: list[ResourceGroup] = field(default_factory=list)
    xml_merges: list[XmlMerge] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: object) -> "MergePlan":
        if not isinstance(data, dict):
            raise MergePlanError("Merge plan must be a mapping")

        groups_data = data.get("groups") or []
        xml_data = data.get("xml") or []
        if not isinstance(groups_data, list) or not isinstance(xml_data, list):
            raise MergePlanError("'groups' and 'xml' must be lists")

        source = data.get("source") or ""
        if groups_data and (not isinstance(source, str) or not source.strip()):
            raise MergePlanError("'source' is required when 'groups' are listed")

        groups = []
        for index, entry in enumerate(groups_data):
            directory = _require_str(entry, "directory", f"groups[{index}]")
            resources = entry.get("resources") or []
            if not isinstance(resources, list) or not all(isinstance(r, str) for r in resources):
                raise MergePlanError(f"groups[{index}].resources must be a list of file names")
            groups.append(ResourceGroup(directory, *resources))

        xml_merges = [
            XmlMerge(
                resource_directory=_require_str(entry, "directory", f"xml[{index}]"),
                target_resource=_require_str(entry, "file", f"xml[{index}]"),
                tag=_require_str(entry, "tag", f"xml[{index}]"),
            )
            for index, entry in enumerate(xml_data)
        ]

        return cls(
            source_resource_directory=str(source).strip(),
            groups=groups,
            xml_merges=xml_merges,
        )


def _require_str(entry: object, key: str, where: str) -> str:
    if not isinstance(entry, dict):
        raise MergePlanError(f"{where} must be a mapping")
    value = entry.get(key)
    if not isinstance(value, str) or not value.strip():
        raise MergePlanError(f"{where}.{key} must be a non-empty string")
    return value.strip()


def load_plan(path: Path) -> MergePlan:
    """Load a merge plan from a YAML file."""
    yaml = YAML(typ="safe")
    with path.open("r", encoding="utf-8") as handle:
        try:
            payload = yaml.load(handle)
        except Exception as exc:
            raise MergePlanError(f"Failed to parse {path}: {exc}") from exc
    return MergePlan.from_dict(payload or {})


@dataclass
class ApplyReport:
    copied: list[Path] = field(default_factory=list)
    merged: list[str] = field(default_factory=list)


def apply_plan(context: ResourceContext, source: EmbeddedResourceSource, plan: MergePlan) -> ApplyReport:
    """Copy every group, then merge every XML entry, in plan order.

    Stops at the first failure; the error propagates to the caller.
    """
    report = ApplyReport()
    if plan.groups:
        report.copied.extend(
            copy_resources(context, source, plan.source_resource_directory, *plan.groups)
        )

    for xml_merge in plan.xml_merges:
        merge_xml_resource(
            context,
            source,
            xml_merge.resource_directory,
            xml_merge.target_resource,
            xml_merge.tag,
        )
        report.merged.append(xml_merge.target_resource)

    logger.info(
        "Applied plan: %d file(s) copied, %d XML merge(s)",
        len(report.copied),
        len(report.merged),
    )
    return report
