from abc import ABC, abstractmethod


class BaseSummarizationClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider's reply as plain text.

        Raises:
            SummarizationNetworkError: on transport or provider API failures.
            SummarizationError: when the provider returns no usable content.
        """
