"""
Exporter Classification
=======================

Answers "which kind of output will this build produce" for the list of
`--output` values given to buildx.

A record with a single field and no `type` key (e.g. `.` or `./out`) is the
buildx shorthand for a local directory export.
"""

from typing import List, Optional

from .attrs import parse_records, split_attr


def has_exporter_type(name: str, exporters: List[str]) -> bool:
    """
    Check whether any exporter is of type `name`.

    Args:
        name: Exporter type (local, tar, docker, registry, image, oci, ...)
        exporters: Raw exporter strings, one per --output flag

    Returns:
        True if an exporter has `type=<name>`, or `name` is "local" and a
        local directory shorthand is present
    """
    for record in parse_records("\n".join(exporters)):
        if len(record) == 1 and split_attr(record[0])[0] != "type":
            if name == "local":
                return True
            continue
        for field in record:
            if split_attr(field) == ("type", name):
                return True
    return False


def has_local_exporter(exporters: List[str]) -> bool:
    return has_exporter_type("local", exporters)


def has_tar_exporter(exporters: List[str]) -> bool:
    return has_exporter_type("tar", exporters)


def has_docker_exporter(exporters: List[str], load: Optional[bool] = None) -> bool:
    """
    Check whether the build result ends up in the docker image store.

    `--load` is itself shorthand for `--output type=docker`, so a truthy
    `load` answers yes whatever the exporters are.
    """
    return bool(load) or has_exporter_type("docker", exporters)
