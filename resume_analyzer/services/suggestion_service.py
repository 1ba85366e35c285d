import logging

from typing import List, Optional

from ..agent import AgentManager
from ..core import LLMConfig
from ..prompt.suggestions import PROMPT
from .exceptions import SuggestionError

logger = logging.getLogger(__name__)

DEFAULT_PROMPT_TEXT_LIMIT = 2000


class SuggestionService:
    """
    Asks the configured generative model for rewritten resume bullet points.

    The model's answer is returned verbatim; nothing about its structure is
    parsed or validated.
    """

    def __init__(
        self,
        config: LLMConfig,
        agent_manager: Optional[AgentManager] = None,
        text_limit: int = DEFAULT_PROMPT_TEXT_LIMIT,
    ):
        self.config = config
        self.agent_manager = agent_manager or AgentManager(config=config)
        self.text_limit = text_limit

    def build_prompt(
        self,
        resume_text: str,
        job_description: str,
        missing_keywords: List[str],
    ) -> str:
        return PROMPT.format(
            ", ".join(missing_keywords),
            resume_text[: self.text_limit],
            job_description[: self.text_limit],
        )

    async def suggest(
        self,
        resume_text: str,
        job_description: str,
        missing_keywords: List[str],
    ) -> str:
        prompt = self.build_prompt(resume_text, job_description, missing_keywords)
        logger.debug(f"Suggestion prompt:\n{prompt}")
        try:
            return await self.agent_manager.run(prompt)
        except Exception as e:
            logger.error(f"Suggestion request to '{self.config.provider}' failed: {e}")
            raise SuggestionError(
                provider=self.config.provider,
                original_error=str(e),
            ) from e
