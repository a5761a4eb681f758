from abc import ABC, abstractmethod

from household_categorizer.models import ClassificationResult, Transaction


class Classifier(ABC):
    @abstractmethod
    def classify(self, transaction: Transaction) -> ClassificationResult | None:
        """Attempt to categorize the transaction."""
        pass
