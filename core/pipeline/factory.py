from typing import Optional, Tuple

from core.bootstrap import Bootstrapper
from core.config import WatchConfiguration
from core.pipeline.cleanup import Cleanup
from core.pipeline.encryptor import EncryptionInvoker
from core.pipeline.loop import PollingLoop
from core.pipeline.verification import VerificationPolicy, is_trustworthy
from core.provisioning.keys import KeyProvisioner
from core.provisioning.tool import ToolProvisioner
from core.storage.base import FileSystem
from core.storage.factory import get_filesystem
from core.tools.runner import SubprocessRunner, ToolRunner


def create_pipeline(
    config: WatchConfiguration,
    fs: Optional[FileSystem] = None,
    runner: Optional[ToolRunner] = None,
    policy: VerificationPolicy = is_trustworthy,
) -> Tuple[Bootstrapper, PollingLoop]:
    """
    Wire up the bootstrapper and polling loop for a configuration.

    Defaults to the local disk and real subprocesses.
    """
    fs = fs or get_filesystem("local")
    runner = runner or SubprocessRunner()

    bootstrapper = Bootstrapper(
        fs,
        ToolProvisioner(fs),
        KeyProvisioner(runner, fs),
    )
    loop = PollingLoop(
        config,
        fs,
        EncryptionInvoker(runner, fs),
        Cleanup(fs, policy),
    )
    return bootstrapper, loop
