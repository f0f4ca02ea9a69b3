"""
Bootstrapper - One-time startup: directories, age executables and key material.
"""

from core.config import WatchConfiguration
from core.errors import AutoEncryptError, BootstrapError
from core.provisioning.keys import KeyProvisioner
from core.provisioning.tool import ToolProvisioner
from core.storage.base import FileSystem
from core.utils import console


def check_layout(config: WatchConfiguration) -> None:
    """
    The input and output trees must not contain each other.

    Raises:
        BootstrapError: If they overlap.
    """
    a, b = config.input_dir, config.output_dir
    if a == b or a in b.parents or b in a.parents:
        raise BootstrapError(f"Input directory {a} and output directory {b} must not overlap")


class Bootstrapper:
    def __init__(self, fs: FileSystem, tools: ToolProvisioner, keys: KeyProvisioner):
        self.fs = fs
        self.tools = tools
        self.keys = keys

    def ensure(self, config: WatchConfiguration) -> None:
        """
        Prepare everything the polling loop needs.

        Raises:
            BootstrapError: If any step fails. The loop must not start.
        """
        check_layout(config)
        try:
            for label, directory in (
                ("input", config.input_dir),
                ("output", config.output_dir),
                ("age binary", config.age_binary_dir),
            ):
                if not self.fs.is_dir(directory):
                    console.info(f"Creating {label} directory at {directory}")
                    self.fs.mkdir(directory)

            self.tools.ensure_tool(config.age_binary_dir)
            self.keys.ensure_keys(config.age_binary_dir, config.pubkeys_file, config.root_dir)
        except (AutoEncryptError, OSError) as e:
            raise BootstrapError(str(e)) from e
