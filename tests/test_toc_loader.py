import json
from pathlib import Path

import pytest

from tocmerge.models.toc import Document
from tocmerge.toc.flatten import flatten_toc
from tocmerge.toc.loader import YamlTocLoader


def test_yaml_toc_loader_builds_hierarchy(tmp_path):
    toc_path = tmp_path / "guide" / "toc.yml"
    toc_path.parent.mkdir(parents=True)
    toc_path.write_text(
        "items:\n"
        "  - name: Intro\n"
        "    href: ../intro.md\n"
        "  - name: Setup\n"
        "    href: setup/index.md#top\n"
        "    items:\n"
        "      - name: Install\n"
        "        href: setup/install.md?tabs=linux\n"
        "  - name: Reference\n"
        "    items:\n"
        "      - name: API\n"
        "        topicHref: api/overview.md\n"
        "        href: api/\n",
        encoding="utf-8",
    )

    root = YamlTocLoader(tmp_path).load(toc_path)

    assert root.document is None
    assert [child.name for child in root.children] == ["Intro", "Setup", "Reference"]

    intro, setup, reference = root.children
    assert intro.document == Document("intro.md")
    assert setup.document == Document("guide/setup/index.md")
    assert setup.children[0].document == Document("guide/setup/install.md")
    assert reference.document is None
    assert reference.children[0].document == Document("guide/api/overview.md")


def test_yaml_toc_loader_accepts_paths_relative_to_docset(tmp_path):
    (tmp_path / "toc.yml").write_text("- name: Home\n  href: index.md\n", encoding="utf-8")

    root = YamlTocLoader(tmp_path).load(Path("toc.yml"))

    assert root.children[0].document == Document("index.md")


def test_toc_entries_outside_the_docset_have_no_document(tmp_path):
    toc_path = tmp_path / "toc.json"
    toc_path.write_text(
        json.dumps(
            {
                "items": [
                    {"name": "External", "href": "https://example.com/docs"},
                    {"name": "Absolute", "href": "/root.md"},
                    {"name": "Bookmark", "href": "#section"},
                    {"name": "Nested TOC", "href": "sub/toc.yml"},
                    {"name": "Folder", "href": "sub/"},
                    {"name": "Group"},
                ]
            }
        ),
        encoding="utf-8",
    )

    root = YamlTocLoader(tmp_path).load(toc_path)

    assert len(root.children) == 6
    assert all(child.document is None for child in root.children)
    assert root.children[0].href == "https://example.com/docs"


def test_empty_toc_file_yields_root_only(tmp_path):
    toc_path = tmp_path / "toc.yml"
    toc_path.write_text("", encoding="utf-8")

    root = YamlTocLoader(tmp_path).load(toc_path)

    assert flatten_toc(root) == [root]


@pytest.mark.parametrize(
    "content",
    [
        "items: not-a-list\n",
        "- just a string\n",
        "- name: Bad\n  href: 42\n",
        "42\n",
        "items:\n  - name: [unclosed\n",
    ],
)
def test_malformed_toc_raises_value_error(tmp_path, content):
    toc_path = tmp_path / "toc.yml"
    toc_path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        YamlTocLoader(tmp_path).load(toc_path)


def test_missing_toc_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlTocLoader(tmp_path).load(tmp_path / "toc.yml")


def test_toc_outside_docset_is_rejected(tmp_path):
    docset = tmp_path / "docs"
    docset.mkdir()
    toc_path = tmp_path / "toc.yml"
    toc_path.write_text("- name: Home\n  href: index.md\n", encoding="utf-8")

    with pytest.raises(ValueError):
        YamlTocLoader(docset).load(toc_path)
