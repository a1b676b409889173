from shared.helper.HelperConfig import HelperConfig
from shared.clients.archive.ArchiveClientInterface import ArchiveClientInterface

class ArchiveClientManager:
    """
    Instantiates the archive clients named in the ARCHIVE_ENGINES setting.
    """

    def __init__(self, helper_config: HelperConfig):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self.clients = self._initialize_clients()

    def _get_engines_from_env(self) -> list[str]:
        """
        Reads the list of archive engines, e.g. "[supabase]".

        Returns:
            list[str]: Engine names, capitalized to match the client class names.

        Raises:
            ValueError: If no engine is configured.
        """
        engines = self.helper_config.get_list_val("ARCHIVE_ENGINES", default=["supabase"])
        if not engines:
            raise ValueError("No archive engines specified in configuration.")
        return [engine.strip().lower().capitalize() for engine in engines]

    def _initialize_clients(self) -> list[ArchiveClientInterface]:
        """
        Imports and instantiates one client per configured engine.

        Returns:
            list[ArchiveClientInterface]: The clients, in configuration order.

        Raises:
            ValueError: If an engine has no matching client class.
        """
        clients = []
        for engine in self._get_engines_from_env():
            class_name = f"ArchiveClient{engine}"
            try:
                module = __import__(
                    f"shared.clients.archive.{engine.lower()}.{class_name}",
                    fromlist=[class_name],
                )
                client_class = getattr(module, class_name)
            except (ImportError, AttributeError) as e:
                raise ValueError(f"Unsupported archive engine specified: '{engine}'. Error: {e}")
            clients.append(client_class(helper_config=self.helper_config))
            self.logging.debug("Instantiated archive client for engine: %s", engine)
        return clients

    def get_clients(self) -> list[ArchiveClientInterface]:
        return self.clients
