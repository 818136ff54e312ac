"""Unit tests for engine result formatting."""

import pytest

from chatops.utils.formatting import (
    CONTAINERS_HEADER,
    format_container,
    format_containers,
    format_images,
    format_version,
    image_tags,
    pretty_byte_size,
)


class TestPrettyByteSize:
    """Tests for pretty_byte_size."""

    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0.0B"),
            (1, "1.0B"),
            (1023, "1023.0B"),
            (1024, "1.0KiB"),
            (1536, "1.5KiB"),
            (1024**2, "1.0MiB"),
            (1024**3, "1.0GiB"),
            (5 * 1024**4, "5.0TiB"),
            (1024**5, "1.0PiB"),
            (1024**6, "1.0EiB"),
            (1024**7, "1.0ZiB"),
        ],
    )
    def test_units(self, size, expected):
        """Test each binary unit boundary."""
        assert pretty_byte_size(size) == expected

    def test_yobibytes(self):
        """Test that values from 1024**8 upward render in YiB."""
        assert pretty_byte_size(1024**8) == "1.0YiB"
        assert pretty_byte_size(3 * 1024**9) == "3072.0YiB"

    def test_monotonic(self):
        """Test that larger sizes never render to a smaller unit."""
        units = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]
        previous = 0
        for exponent in range(9):
            rendered = pretty_byte_size(1024**exponent)
            unit = rendered.lstrip("0123456789.")
            assert units.index(unit) >= previous
            previous = units.index(unit)

    def test_real_image_size(self):
        """Test a typical image size."""
        assert pretty_byte_size(187_654_321) == "179.0MiB"


class TestFormatContainers:
    """Tests for container listing rendering."""

    def test_empty_listing_is_header_only(self):
        """Test that zero containers yield only the header."""
        assert format_containers([]) == CONTAINERS_HEADER
        assert format_containers([]) == "*Containers:*\n\n"

    def test_container_block(self):
        """Test all fields of one container block."""
        container = {
            "Names": ["/web", "/web-alias"],
            "Image": "nginx:latest",
            "Command": "nginx -g 'daemon off;'",
            "Mounts": [
                {"Source": "/srv/html", "Destination": "/usr/share/nginx/html"},
                {"Source": "/srv/conf", "Destination": "/etc/nginx/conf.d"},
            ],
            "Ports": [
                {"PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"},
                {"PrivatePort": 443, "Type": "tcp"},
            ],
            "Status": "Up 2 hours",
        }

        block = format_container(container)

        assert block == (
            "Name: /web, /web-alias\n"
            "Image: nginx:latest\n"
            "command: nginx -g 'daemon off;'\n"
            "mounts: /srv/html:/usr/share/nginx/html\n/srv/conf:/etc/nginx/conf.d\n"
            "ports: 80->8080\n443->0\n"
            "status: Up 2 hours\n\n"
        )

    def test_container_without_mounts_or_ports(self):
        """Test a container with null mounts and ports."""
        block = format_container({"Names": ["/db"], "Image": "postgres", "Mounts": None, "Ports": None})

        assert "mounts: \n" in block
        assert "ports: \n" in block

    def test_blocks_follow_header(self):
        """Test that each container gets a block after the header."""
        text = format_containers([{"Names": ["/a"]}, {"Names": ["/b"]}])

        assert text.startswith(CONTAINERS_HEADER)
        assert text.count("Name: ") == 2
        assert text.index("Name: /a") < text.index("Name: /b")


class TestFormatImages:
    """Tests for image listing rendering."""

    def test_untagged_count(self):
        """Test that untagged images are counted, not listed."""
        images = [
            {"RepoTags": ["nginx:latest"], "Size": 1024},
            {"RepoTags": [], "Size": 10},
            {"RepoTags": None, "Size": 10},
            {"RepoTags": ["<none>:<none>"], "Size": 10},
        ]

        text = format_images(images)

        assert text.endswith("There are 3 untagged images.")
        assert text.count("Tags: ") == 1

    def test_tagged_image_lists_all_tags_and_size(self):
        """Test the full tag list and unit-correct size."""
        images = [{"RepoTags": ["app:1.0", "app:latest", "registry/app:1.0"], "Size": 3 * 1024**2}]

        text = format_images(images)

        assert text == "Tags: app:1.0,app:latest,registry/app:1.0\nSize: 3.0MiB\n\nThere are 0 untagged images."

    def test_no_images(self):
        """Test an engine without images."""
        assert format_images([]) == "There are 0 untagged images."

    def test_image_tags_ignores_placeholder(self):
        """Test that the <none>:<none> placeholder is not a tag."""
        assert image_tags({"RepoTags": ["<none>:<none>"]}) == []
        assert image_tags({}) == []


class TestFormatVersion:
    """Tests for version rendering."""

    def test_contains_both_versions(self):
        """Test the bot and engine versions are both present."""
        text = format_version("v1.1.3", "24.0.7")

        assert "Bot version: v1.1.3" in text
        assert "24.0.7" in text
