[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wallarmrules"
version = "0.1.0"
description = "Helpers for shaping Wallarm rule conditions, hint payloads, triggers, scanner scopes, users, tenants and rules settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["wallarm", "waf", "rules", "vpatch", "triggers", "security"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wallarmrules"]

[tool.pytest.ini_options]
addopts = "-ra"
