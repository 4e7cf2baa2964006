from bundlekit.config import config_setting


class BundleSettings:
    """Library-wide settings read by :class:`~bundlekit.bundle.Bundle`.

    Values come from the bound configuration, e.g.::

        bind_config_values(**{'BundleSettings.infer_long_integers': True})

    or from a config file passed to ``bind_config_file``.
    """

    @config_setting(default=False)
    def infer_long_integers(self) -> bool:
        """Tag every plain ``int`` put without a kind as ``Kind.LONG``."""
        ...

    @config_setting(default=False)
    def warn_on_kind_mismatch(self) -> bool:
        """Log kind-mismatch fallbacks at WARNING instead of DEBUG."""
        ...


settings = BundleSettings()
