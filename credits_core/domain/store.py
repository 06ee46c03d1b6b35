"""Application store interface - persistence contract for the lifecycle service"""

from abc import ABC, abstractmethod
from typing import List, Optional

from credits_core.domain.models import CreditApplication


class ApplicationStore(ABC):
    """
    Abstract store for CreditApplication records.

    Implementations own ``id`` and ``created_at`` assignment and provide
    transactional isolation for each lifecycle call.
    """

    @abstractmethod
    def save(self, application: CreditApplication) -> CreditApplication:
        """
        Insert a new application (``id`` is None) or replace the mutable
        fields of an existing one.

        Returns:
            The stored application with ``id`` and ``created_at`` populated
        """

    @abstractmethod
    def find_by_id(self, application_id: int) -> Optional[CreditApplication]:
        """Return the application, or None if absent"""

    @abstractmethod
    def find_all(self) -> List[CreditApplication]:
        """Return every stored application in store order"""

    @abstractmethod
    def exists_by_id(self, application_id: int) -> bool:
        pass

    @abstractmethod
    def delete_by_id(self, application_id: int) -> None:
        pass
