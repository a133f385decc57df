"""UI tests for the Sauce Demo store: framework, page objects and test specs."""
