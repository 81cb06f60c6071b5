from mr_mirror.core.application.ports.vcs_port import VcsPort

__all__ = ["VcsPort"]
