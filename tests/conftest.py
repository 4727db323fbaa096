"""
Shared test fixtures and utilities for igsearch tests.

The ``ig_project`` fixture builds a small but complete IG project tree: a
SUSHI configuration, FSH sources, authored resources in JSON and XML, page
content, translations, generated resources and a built ``output`` folder,
plus the kind of scratch directories the walker must prune.
"""

from pathlib import Path

import pytest

from igsearch import IGSearch, SearchConfig

SUSHI_CONFIG = """\
id: example.fhir.ig
canonical: http://example.org/fhir/ig
name: ExampleIG
status: draft
fhirVersion: 4.0.1
"""

PATIENT_FSH = """\
Profile: ExamplePatient
Parent: Patient
Title: "Example Patient"
Description: "A Patient profile for the example IG."
* name 1..* MS
"""

PATIENT_JSON = """\
{
  "resourceType": "StructureDefinition",
  "id": "example-patient",
  "type": "Patient",
  "baseDefinition": "http://hl7.org/fhir/StructureDefinition/Patient"
}
"""

OBSERVATION_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<Observation xmlns="http://hl7.org/fhir">
  <id value="obs-1"/>
  <subject><reference value="Patient/example"/></subject>
</Observation>
"""

INTRO_MD = """\
# Introduction

This IG defines Patient profiles.
It also covers observations.
"""

OUTPUT_HTML = """\
<html>
<body>
<p>Patient profile page</p>
</body>
</html>
"""

OUTPUT_JSON = """\
{"resourceType": "StructureDefinition", "id": "example-patient", "name": "Patient"}
"""


def write(path: Path, content: str | bytes) -> Path:
    """Create ``path`` with ``content``, making parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def ig_project(tmp_path: Path) -> Path:
    """Create a sample IG project with every category populated."""
    root = tmp_path / "ig"
    write(root / "sushi-config.yaml", SUSHI_CONFIG)
    write(root / "other.yaml", "title: Patient stuff\n")
    write(root / "input" / "fsh" / "patient.fsh", PATIENT_FSH)
    write(root / "input" / "resources" / "patient.json", PATIENT_JSON)
    write(root / "input" / "resources" / "obs.xml", OBSERVATION_XML)
    write(root / "input" / "resources" / "package.json", '{"name": "Patient package"}\n')
    write(root / "input" / "maps" / "patient.map", "map Patient -> Person\n")
    write(root / "input" / "pagecontent" / "intro.md", INTRO_MD)
    write(root / "input" / "translations" / "de.po", 'msgid "Patient"\nmsgstr "Patient"\n')
    write(root / "input" / "translations" / "blob.bin", b"Patient\x00\x01\x02")
    write(root / "fsh-generated" / "resources" / "StructureDefinition-example-patient.json",
          PATIENT_JSON)
    write(root / "output" / "index.html", OUTPUT_HTML)
    write(root / "output" / "StructureDefinition-example-patient.json", OUTPUT_JSON)
    # pruned directories
    write(root / "input" / "pagecontent" / "temp" / "scratch.md", "Patient scratch\n")
    write(root / "input" / ".git" / "notes.fsh", "Patient in git metadata\n")
    write(root / "output" / "txcache" / "cache.json", '{"resourceType": "Patient"}\n')
    return root


@pytest.fixture
def make_file():
    """Provide the ``write`` helper to tests."""
    return write


@pytest.fixture
def engine() -> IGSearch:
    """A fresh engine with the default configuration."""
    return IGSearch(SearchConfig())


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take longer to run")
