from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """Logging seam for application services; keeps them free of ``logging`` setup."""

    @abstractmethod
    def log(self, level: int, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def debug(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def exception(self, msg: str, *args, **kwargs) -> None:
        pass
