from .step_20_system_packages import SystemPackagesStep
from .step_30_account_dirs import AccountDirsStep
from .step_40_download_jar import DownloadJarStep
from .step_50_server_files import ServerFilesStep
from .step_55_import_ops import ImportOpsStep
from .step_60_ownership import OwnershipStep
from .step_70_systemd_service import SystemdServiceStep
from .step_80_firewall import FirewallStep

__all__ = [
    "SystemPackagesStep",
    "AccountDirsStep",
    "DownloadJarStep",
    "ServerFilesStep",
    "ImportOpsStep",
    "OwnershipStep",
    "SystemdServiceStep",
    "FirewallStep",
]
