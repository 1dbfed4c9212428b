# -*- coding: utf-8 -*-
"""
Shared pytest configuration.

Puts the project root on sys.path, runs Qt headless and keeps test
logs out of the working tree.
"""

import os
import sys
import tempfile
from pathlib import Path

# Must be set before PyQt5 or app.config are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("PROJECTS_LOGS_DIR", tempfile.mkdtemp(prefix="projects-test-logs-"))

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from models.project import ProjectDraft
from ui.wizards.project_wizard.wizard_state import WizardState


@pytest.fixture
def draft():
    """Fresh, empty project draft."""
    return ProjectDraft()


@pytest.fixture
def state():
    """Wizard state as it is when the wizard opens."""
    return WizardState()
