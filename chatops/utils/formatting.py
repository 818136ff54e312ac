"""Text rendering for Docker engine results."""

from typing import Any, Dict, Iterable, List

BYTE_UNITS = ["", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi"]

CONTAINERS_HEADER = "*Containers:*\n\n"


def pretty_byte_size(size: float) -> str:
    """Format a byte count with binary (1024-based) units.

    >>> pretty_byte_size(0)
    '0.0B'
    >>> pretty_byte_size(1536)
    '1.5KiB'
    """
    value = float(size)
    for unit in BYTE_UNITS:
        if abs(value) < 1024.0:
            return f"{value:3.1f}{unit}B"
        value /= 1024.0
    return f"{value:.1f}YiB"


def _format_mounts(mounts: Iterable[Dict[str, Any]]) -> str:
    return "\n".join(f"{m.get('Source', '')}:{m.get('Destination', '')}" for m in mounts)


def _format_ports(ports: Iterable[Dict[str, Any]]) -> str:
    # Unpublished ports have no PublicPort key
    return "\n".join(f"{p.get('PrivatePort', 0)}->{p.get('PublicPort', 0)}" for p in ports)


def format_container(container: Dict[str, Any]) -> str:
    """Render one entry of the engine's container listing."""
    return (
        f"Name: {', '.join(container.get('Names') or [])}\n"
        f"Image: {container.get('Image', '')}\n"
        f"command: {container.get('Command', '')}\n"
        f"mounts: {_format_mounts(container.get('Mounts') or [])}\n"
        f"ports: {_format_ports(container.get('Ports') or [])}\n"
        f"status: {container.get('Status', '')}\n\n"
    )


def format_containers(containers: List[Dict[str, Any]]) -> str:
    """Render the ``/ps`` reply: a header then one block per container."""
    return CONTAINERS_HEADER + "".join(format_container(c) for c in containers)


def image_tags(image: Dict[str, Any]) -> List[str]:
    """Tags of an image, ignoring the ``<none>:<none>`` placeholder."""
    return [tag for tag in image.get("RepoTags") or [] if tag != "<none>:<none>"]


def format_images(images: List[Dict[str, Any]]) -> str:
    """Render the ``/images`` reply.

    Tagged images are listed with all their tags and size; untagged images
    are only counted.
    """
    lines = []
    untagged = 0
    for image in images:
        tags = image_tags(image)
        if not tags:
            untagged += 1
            continue
        lines.append(f"Tags: {','.join(tags)}\nSize: {pretty_byte_size(image.get('Size', 0))}\n")

    lines.append(f"There are {untagged} untagged images.")
    return "\n".join(lines)


def format_version(bot_version: str, engine_version: str) -> str:
    """Render the ``/version`` reply."""
    return f"Bot version: {bot_version}\nDocker version: {engine_version}"
