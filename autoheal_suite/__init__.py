"""
Sauce Demo self-healing test suites.

Packages:
  - ui_testing: Playwright framework, autoheal-locator helper, page objects and UI specs
  - unit: offline tests of the helper, page objects and suite tooling
"""
