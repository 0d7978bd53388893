"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "resolver.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for kube-schema-resolver.
# Keep exactly one schema source: discovery (live API server) or definitions (static table).
# Replace every <REQUIRED> placeholder before running resolve.
# Uncomment and replace <OPTIONAL> placeholders only when your setup needs them.

discovery:
  # API server root, for example https://cluster.example:6443
  base_url: "<REQUIRED>"
  # Set at most one of bearer_token and bearer_token_path.
  # bearer_token: "<OPTIONAL>"
  # bearer_token_path: "<OPTIONAL>"
  verify_tls: true
  # ca_bundle_path: "<OPTIONAL>"
  timeout_seconds: 30

# definitions:
#   # JSON or YAML file mapping definition names to schema objects.
#   path: "<REQUIRED>"
#   # Optional type name -> GVK registry; omit when the table carries
#   # x-kubernetes-group-version-kind extensions itself.
#   scheme:
#     k8s.io/api/core/v1.Pod:
#       - group: ""
#         version: v1
#         kind: Pod
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
