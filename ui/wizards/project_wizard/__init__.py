# -*- coding: utf-8 -*-
"""
Create Project Wizard Package.

This package contains:
- step_graph: Step identities, step table and ordinal mapping
- wizard_state: Immutable wizard state, events and the reducer
- project_context: Wizard session context (reference number, status)

Views consume ProjectWizardController (controllers package) rather than
these modules directly.
"""
