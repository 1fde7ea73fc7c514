"""Starter .patchstat.toml template."""

CONFIG_FILENAME = ".patchstat.toml"

DEFAULT_TOML = """\
# patchstat configuration
version = "1.0"

[output]
format = "terminal"       # terminal | json
show_summary = true
show_table = false        # per-file breakdown when several patches are given

[diagnostics]
log_junk = false          # log each line that could not be classified
log_level = "warning"     # debug | info | warning | error
"""
