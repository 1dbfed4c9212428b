# -*- coding: utf-8 -*-
"""
Projects Controllers
====================
Controller layer between the wizard views and the wizard state.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates

Usage:
    from controllers import ProjectWizardController

    controller = ProjectWizardController(creation_sink=repository.save)
    controller.project_created.connect(on_created)
    controller.update_draft(mode="guided")
    controller.advance()
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Domain controllers
from controllers.project_wizard_controller import (
    CreationSink,
    ProjectWizardController,
)

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Project wizard
    "CreationSink",
    "ProjectWizardController",
]
