# topgrade

A library of building blocks for keeping a machine up to date: identifying
the Linux distribution, locating executables and privilege escalation tools,
reporting progress on the terminal, and building or running the commands
that concern Homebrew, PowerShell modules, Vagrant boxes, toolbox
containers, tmux sessions and remote hosts.

It depends on nothing outside the standard library and runs on Python 3.10
and later.

## Modules

| Module                 | Purpose |
|------------------------|---------|
| `topgrade.utils`       | `which`, `require`, `sudo`, `editor`, `if_exists`, `require_path`, `require_option`, `is_descendant_of`, `check_returncode`; the exceptions `SkipStep` and `ProcessFailed` |
| `topgrade.terminal`    | `Terminal` with separators, warnings, info lines, step results, yes/no and retry prompts and desktop notifications; module-level functions that use one shared terminal; `StepResult`, `StepResultKind`, `separator_line`, `shell`, `run_shell` |
| `topgrade.linux`       | `Distribution`, `Distribution.detect`, `parse_os_release`, `is_wsl`, `UnknownLinuxDistribution` |
| `topgrade.archlinux`   | `execution_path` for AUR helpers, `find_pacnew` and `show_pacnew` for `.pacnew` / `.pacsave` files |
| `topgrade.vagrant`     | `BoxStatus`, `VagrantBox`, `parse_status_output`, `get_boxes` |
| `topgrade.remote`      | `ssh_args` and `async_ssh_args` for running the upgrade on a host over SSH |
| `topgrade.toolbx`      | `parse_toolbox_list`, `list_toolboxes`, `host_executable_path` |
| `topgrade.tmux`        | `Tmux`, `topgrade_command`, `run_in_tmux` |
| `topgrade.shells`      | `zshrc`, `vimrc`, `nvimrc` |
| `topgrade.macos`       | `update_available_from`, `system_update_available` |
| `topgrade.brew`        | `BrewVariant` (Linux, Intel and ARM Homebrew) and `both_exist` |
| `topgrade.powershell`  | `Powershell` with `detect`, `windows_powershell`, `has_module`, `supports_windows_update`, `update_modules_command` |

## Examples

Identify the running distribution:

```python
from topgrade.linux import Distribution, parse_os_release

distro = Distribution.detect()
print(distro, distro.redhat_based())

print(parse_os_release('ID=manjaro\nID_LIKE="arch"\n'))  # Distribution.ARCH
```

`Distribution.detect` raises `UnknownLinuxDistribution` when neither
`/bedrock` nor a recognisable `/etc/os-release` is found.

Report progress the same way for every step:

```python
from topgrade.terminal import StepResult, StepResultKind, print_result, print_separator

print_separator("System update")
print_result("System update", StepResult(StepResultKind.SUCCESS))
print_result("Snap", StepResult(StepResultKind.SKIPPED, "Snapd socket does not exist"))
```

Steps that cannot run on this machine raise `SkipStep`:

```python
from topgrade.utils import SkipStep, require

try:
    apt = require("apt-get")
except SkipStep as exc:
    print(f"skipped: {exc.reason}")
```

Find Vagrant boxes in a directory:

```python
from topgrade.vagrant import get_boxes

for box in get_boxes("vagrant", "/srv/machines"):
    print(box.smart_name(), box.initial_status.powered_on())
```

Build the command line for a Homebrew installation or for updating
PowerShell modules:

```python
from topgrade.brew import BrewVariant
from topgrade.powershell import Powershell

print(BrewVariant.MAC_INTEL.command("arm64"))  # ['arch', '-x86_64', '/usr/local/bin/brew']
print(Powershell.detect().update_modules_command(verbose=True))
```

`update_modules_command` raises `SkipStep` when no PowerShell was found.

## Environment

- `TOPGRADE_PREFIX` — text shown in front of separators and the retry prompt.
- `SHELL` — the shell opened when the user chooses to fix a failed step by hand.
- `EDITOR` — the editor returned by `topgrade.utils.editor()`.
- `ZDOTDIR`, `XDG_CONFIG_HOME` — honoured when locating zsh and Neovim
  configuration files.
- `TMUX` — whether `run_in_tmux` attaches to the session or just exits.

## What this package does not do

There is no command-line program and no configuration file. The package
does not decide which steps to run, nor does it run system package
managers, plugin managers or editor plugin updates itself; it provides the
detection, lookup, reporting and command-building pieces such a runner is
made from.