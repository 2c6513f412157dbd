"""
Command Table

Maps (action, sub-action) pairs to Neovim command-mode strings.

Every action has an explicit default sub-action: an absent or unrecognized
sub-action resolves to that default. `health` has a single behavior and
ignores both sub-action and target.

Commands are handed to nvim as a single argv element (no shell). Inside
nvim the command line still treats `|` as a command separator and `"` as a
comment start, so targets containing those, or any control character, are
rejected instead of being escaped.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from nvimtool.core.errors import MissingTarget, UnknownAction, UnsafeTarget
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)


class Action(str, Enum):
    """Top-level operation categories."""

    HEALTH = "health"
    PLUGINS = "plugins"
    FORMAT = "format"
    LSP = "lsp"


class HealthSubAction(str, Enum):
    CHECK = "check"


class PluginsSubAction(str, Enum):
    STATUS = "status"
    UPDATE = "update"
    CLEAN = "clean"
    INSTALL = "install"


class FormatSubAction(str, Enum):
    CHECK = "check"
    RUN = "run"


class LspSubAction(str, Enum):
    INFO = "info"
    INSTALL = "install"
    UNINSTALL = "uninstall"


SubAction = Union[HealthSubAction, PluginsSubAction, FormatSubAction, LspSubAction]


@dataclass(frozen=True)
class CommandSpec:
    """One row of the command table."""

    template: str
    target_label: Optional[str] = None

    @property
    def requires_target(self) -> bool:
        return "{target}" in self.template

    def render(self, target: Optional[str] = None) -> str:
        if not self.requires_target:
            return self.template
        return self.template.replace("{target}", target or "")


SUB_ACTIONS: dict[Action, type[Enum]] = {
    Action.HEALTH: HealthSubAction,
    Action.PLUGINS: PluginsSubAction,
    Action.FORMAT: FormatSubAction,
    Action.LSP: LspSubAction,
}

DEFAULT_SUB_ACTIONS: dict[Action, SubAction] = {
    Action.HEALTH: HealthSubAction.CHECK,
    Action.PLUGINS: PluginsSubAction.STATUS,
    Action.FORMAT: FormatSubAction.CHECK,
    Action.LSP: LspSubAction.INFO,
}

COMMAND_TABLE: dict[tuple[Action, SubAction], CommandSpec] = {
    # Health
    (Action.HEALTH, HealthSubAction.CHECK): CommandSpec("checkhealth"),
    # Plugins (lazy.nvim)
    (Action.PLUGINS, PluginsSubAction.STATUS): CommandSpec("Lazy"),
    (Action.PLUGINS, PluginsSubAction.UPDATE): CommandSpec("Lazy update"),
    (Action.PLUGINS, PluginsSubAction.CLEAN): CommandSpec("Lazy clean"),
    (Action.PLUGINS, PluginsSubAction.INSTALL): CommandSpec(
        "Lazy install {target}", target_label="Plugin name"
    ),
    # Format (conform.nvim)
    (Action.FORMAT, FormatSubAction.CHECK): CommandSpec("ConformInfo"),
    (Action.FORMAT, FormatSubAction.RUN): CommandSpec(
        "ConformInfo {target}", target_label="File path"
    ),
    # LSP (mason.nvim)
    (Action.LSP, LspSubAction.INFO): CommandSpec("Mason"),
    (Action.LSP, LspSubAction.INSTALL): CommandSpec(
        "MasonInstall {target}", target_label="LSP server name"
    ),
    (Action.LSP, LspSubAction.UNINSTALL): CommandSpec(
        "MasonUninstall {target}", target_label="LSP server name"
    ),
}

_UNSAFE_TARGET_RE = re.compile(r'[|"\x00-\x1f\x7f]')


def parse_action(action: Any) -> Action:
    """Map an action name to the Action enum.

    Raises:
        UnknownAction: The action has no row in the command table.
    """
    try:
        return Action(action)
    except ValueError:
        raise UnknownAction(action) from None


def parse_sub_action(action: Action, sub_action: Optional[str]) -> SubAction:
    """Resolve a sub-action name, falling back to the action's default.

    `health` always resolves to its single sub-action.
    """
    default = DEFAULT_SUB_ACTIONS[action]

    if action is Action.HEALTH or sub_action is None:
        return default

    try:
        return SUB_ACTIONS[action](sub_action)
    except ValueError:
        logger.debug(
            f"Unrecognized sub-action '{sub_action}' for {action.value}, "
            f"using '{default.value}'"
        )
        return default


def lookup(action: Any, sub_action: Optional[str] = None) -> CommandSpec:
    """Return the command table row for an action / sub-action pair."""
    parsed = parse_action(action)
    return COMMAND_TABLE[(parsed, parse_sub_action(parsed, sub_action))]


def check_target(target: str) -> str:
    """Reject targets the Ex command line would not take literally."""
    match = _UNSAFE_TARGET_RE.search(target)
    if match:
        raise UnsafeTarget(target, match.group(0))
    return target


def resolve_command(request: Any) -> str:
    """Resolve a validated request to exactly one Neovim command string.

    Args:
        request: Object with `action`, `sub_action` and `target` attributes
            (normally a ToolRequest).

    Returns:
        The command to run in nvim's command mode.

    Raises:
        UnknownAction: Action outside the command table.
        MissingTarget: The selected row needs a target and none was given.
        UnsafeTarget: The target contains a separator, quote or control character.
    """
    action = parse_action(request.action)
    sub_action = parse_sub_action(action, request.sub_action)
    spec = COMMAND_TABLE[(action, sub_action)]

    if not spec.requires_target:
        return spec.template

    target = request.target
    if not target:
        raise MissingTarget(
            action.value, sub_action.value, spec.target_label or "Target"
        )

    return spec.render(check_target(target))


def describe_table() -> list[dict[str, Any]]:
    """List every command table row, defaults flagged.

    Returns:
        Rows sorted by action then sub-action as plain dicts.
    """
    rows = []
    for (action, sub_action), spec in COMMAND_TABLE.items():
        rows.append(
            {
                "action": action.value,
                "subAction": sub_action.value,
                "command": spec.template,
                "requiresTarget": spec.requires_target,
                "isDefault": DEFAULT_SUB_ACTIONS[action] is sub_action,
            }
        )
    return sorted(rows, key=lambda row: (row["action"], row["subAction"]))
