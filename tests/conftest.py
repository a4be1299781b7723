"""
Pytest configuration and shared fixtures for pertable tests.

This module provides:
- Isolation from any user configuration file
- A small in-memory element collection
- Temporary dataset and configuration files
"""

import json
import os
import tempfile
from pathlib import Path

import pytest

from pertable.elements.structures import Element


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests independent of PERTABLE_CONFIG and ~/.config/pertable."""
    monkeypatch.delenv("PERTABLE_CONFIG", raising=False)
    monkeypatch.setattr("pertable.core.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")


@pytest.fixture
def sample_records():
    """Raw dataset records, as they appear in the JSON file."""
    return [
        {
            "name": "Hydrogen",
            "symbol": "H",
            "number": 1,
            "category": "diatomic nonmetal",
            "phase": "Gas",
            "atomic_mass": 1.008,
            "period": 1,
            "xpos": 1,
            "ypos": 1,
            "shells": [1],
            "electron_configuration": "1s1",
            "ionization_energies": [1312.0],
        },
        {"name": "Helium", "symbol": "He", "number": 2, "category": "noble gas", "shells": [2]},
        {"name": "Carbon", "symbol": "C", "number": 6, "shells": [2, 4]},
        {"name": "Oxygen", "symbol": "O", "number": 8, "shells": [2, 6]},
        {
            "name": "Iron",
            "symbol": "Fe",
            "number": 26,
            "category": "transition metal",
            "appearance": "lustrous metallic with a grayish tinge",
            "atomic_mass": 55.845,
            "boil": 3134,
            "density": 7.874,
            "shells": [2, 8, 14, 2],
            "color": None,
        },
        {"name": "Indium", "symbol": "In", "number": 49},
        {"name": "Tin", "symbol": "Sn", "number": 50},
        {"name": "Iodine", "symbol": "I", "number": 53},
    ]


@pytest.fixture
def sample_elements(sample_records):
    """A small element collection for matcher tests."""
    return tuple(Element.from_dict(record) for record in sample_records)


@pytest.fixture
def iron(sample_elements):
    """The iron record from the sample collection."""
    return next(el for el in sample_elements if el.symbol == "Fe")


@pytest.fixture
def write_dataset():
    """
    Factory fixture writing a dataset document to a temporary JSON file.

    The files are removed after the test.
    """
    paths = []

    def _write(document) -> Path:
        fd, path = tempfile.mkstemp(suffix=".json")
        os.close(fd)  # Close file descriptor to prevent leaks
        with open(path, "w", encoding="utf-8") as f:
            if isinstance(document, str):
                f.write(document)
            else:
                json.dump(document, f)
        paths.append(Path(path))
        return Path(path)

    yield _write

    for path in paths:
        if path.exists():
            path.unlink()


@pytest.fixture
def temp_dataset(write_dataset, sample_records):
    """A valid dataset file containing the sample records."""
    return write_dataset({"elements": sample_records})


@pytest.fixture
def sample_config_dict():
    """Create a sample configuration dictionary."""
    return {
        "log_level": "INFO",
        "display": {
            "use_styling": False,
            "max_width": 60,
            "label_color": "green",
            "header_color": "magenta",
        },
    }


@pytest.fixture
def temp_config_file(sample_config_dict):
    """Create a temporary YAML config file."""
    import yaml

    config_fd, config_path = tempfile.mkstemp(suffix=".yaml")
    os.close(config_fd)  # Close file descriptor to prevent leaks

    with open(config_path, "w") as f:
        yaml.dump(sample_config_dict, f)

    yield config_path

    Path(config_path).unlink()
