# wallarmrules

Pure-Python helpers for the data shapes you work with when you manage Wallarm
resources. They cover rule conditions and request points, hint-based rules
(virtual patches, variative keys and values), triggers, scanner scope, users,
tenants and client rules settings.

The package builds request payloads and interprets API responses. It has no
dependencies outside the standard library.

## Installation

```
pip install wallarmrules
```

To install the test dependencies as well:

```
pip install "wallarmrules[test]"
```

## Modules

- `wallarmrules.points` handles points and action conditions.
  - `expand_points` turns the indexes of numeric points (`path`, `array`, `json_array` and others) into floats.
  - `wrap_point_elements` regroups a flat API point into nested lists of strings, and `align_point_scheme` renders the numeric indexes of an API point as strings.
  - `expand_action_conditions` turns configured action blocks into `ActionDetails` and drops blocks without a type.
  - `action_details_to_map` and `hash_action_map` give the mapping and set-hash forms of a condition.
  - `fill_in_default_values` clears the values of `absent` conditions.
  - `equal_without_order`, `compare_action_details` and `action_points_equal` compare conditions regardless of order.
  - `diff_strings` returns the items of one sequence that are missing from another.
- `wallarmrules.hints` handles hint-based rules.
  - `HintType` lists the rule kinds (`vpatch`, `variative_keys`, `variative_values`), and `HintRule` holds a rule as the hints API returns it.
  - `hint_read_query` builds the query that reads one rule.
  - `hint_create_payload` builds the request body that creates a rule. It raises `ValueError` if a `vpatch` has no `attack_type`.
  - `match_rules` finds the rule in a hint listing that matches the configured one. It returns the matching ID (0 if there is none) and the IDs that did not match.
  - `flatten_points` joins nested points into one flat point.
- `wallarmrules.ruleids` handles rule identifiers.
  - `parse_import_id` and `format_resource_id` read and write `{clientID}/{actionID}/{ruleID}` identifiers. `parse_import_id` raises `ValueError` on a malformed ID.
  - `is_last_hint` tells whether an action holds only a single rule, in which case the whole action can be deleted.
- `wallarmrules.triggers` handles triggers.
  - `expand_filters`, `expand_actions` and `expand_threshold` produce `TriggerFilter`, `TriggerAction` and `TriggerThreshold` values.
  - `lock_time_seconds` converts a lock time to seconds. A lock time of zero becomes the "forever" value.
  - `check_threshold_required` raises `ValueError` when a threshold-based template has no threshold.
- `wallarmrules.scanner` handles scanner scope.
  - `is_ip_address` and `resource_type` classify elements as `ip` or `domain`.
  - `collect_resources` maps created scanner objects to their IDs.
  - `plan_update` returns a `ScannerPlan` of elements to add and to delete.
  - `split_deletions` splits the IDs to delete into IP and domain groups, and `merge_resources` combines kept and added resources.
  - `scanner_resource_id` builds the resource ID.
- `wallarmrules.settings` handles client rules settings.
  - `RulesSettings` holds the settings. `validate` checks their ranges, `to_params` builds the update payload, and `from_api` reads a response body.
  - `settings_resource_id` builds the resource ID.
- `wallarmrules.validation` provides `validate_positive`, `validate_in` and `validate_range`. They raise `ValidationError`.
- `wallarmrules.credentials` handles users.
  - `generate_password` makes a random password with at least one digit and one special character, and `is_password_valid` checks the password policy.
  - `map_permission` translates role names into the names the API expects.
  - `validate_permission` and `validate_realname` check user fields.
- `wallarmrules.tenant` provides `generate_vuln_prefix`, which derives a two- to four-letter prefix from a tenant name, and `remove_consecutive_duplicates`.
- `wallarmrules.events` provides `expand_integration_events`, which builds `IntegrationEvent` lists and falls back to defaults for each integration type.

## Example

```python
from wallarmrules.hints import HintType, hint_create_payload
from wallarmrules.points import expand_action_conditions
from wallarmrules.ruleids import format_resource_id, parse_import_id
from wallarmrules.tenant import generate_vuln_prefix

parse_import_id(format_resource_id(6039, 4123, 93830))  # (6039, 4123, 93830)
generate_vuln_prefix("tf-test-tenant")                  # "TFTS"

conditions = expand_action_conditions(
    [{"type": "iequal", "value": "Example.com", "point": {"header": "host"}}]
)
payload = hint_create_payload(
    HintType.VPATCH, 1, conditions, [["get_all"]], attack_type="xss"
)
```

## What it does not do

The package makes no network calls and keeps no state. You fetch and send
data with an HTTP client of your own. It has no command-line tool. It does
not import existing resources into a state store, and it does not carry out
deletions: `is_last_hint` only tells you which deletion applies.

## Running the tests

```
pytest
```