"""Project version constants.

These constants are used in logs and embedded in Arrow schema metadata so that
materialized frames can be traced back to a specific engine version.
"""

ENGINE_NAME: str = "reportframes"
ENGINE_VERSION: str = "0.1.0"
