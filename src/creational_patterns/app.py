# src/creational_patterns/app.py
from typing import Optional

from creational_patterns.application.abstract_factory.service import AbstractFactoryApplicationService
from creational_patterns.application.factory_method.service import FactoryMethodApplicationService
from creational_patterns.application.prototype.service import PrototypeApplicationService
from creational_patterns.config.manager import ConfigurationManager
from creational_patterns.infrastructure.logging.logger import setup_logging
from creational_patterns.infrastructure.registry.creator_registry import get_creator_registry
from creational_patterns.infrastructure.registry.factory_registry import get_factory_registry
from creational_patterns.infrastructure.registry.registration import register_default_variants


class Application:
    """Main application class wiring configuration, logging, registries and services."""

    def __init__(self,
                 config_path: Optional[str] = None,
                 log_level: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None):
        # Initialize configuration
        self.config_manager = config_manager or ConfigurationManager(config_path)
        self.config = self.config_manager.config

        # Set up logging, letting an explicit level win over the configured one
        logging_config = self.config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": log_level.upper()})
        self.logger = setup_logging(logging_config)

        # Initialize registries
        register_default_variants()
        self.factory_registry = get_factory_registry()
        self.creator_registry = get_creator_registry()

        # Initialize application services
        self.prototype_service = PrototypeApplicationService(self.config.prototype)
        self.abstract_factory_service = AbstractFactoryApplicationService(self.factory_registry)
        self.factory_method_service = FactoryMethodApplicationService(self.creator_registry)

        self.logger.debug("Application initialized")
