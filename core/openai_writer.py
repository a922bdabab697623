from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI

from config import DEFAULT_MODEL, MAX_TOKENS, TEMPERATURE
from templates.article_prompt import SYSTEM_PROMPT, USER_PROMPT
from .errors import GenerationError
from .logger import log_event


class OpenAIArticleWriter:
    def __init__(self, api_key: str = None, model: str = DEFAULT_MODEL, llm=None):
        self.api_key = api_key
        self.model = model
        self.llm = llm
        self.prompt = ChatPromptTemplate.from_messages([
            ("system", SYSTEM_PROMPT),
            ("human", USER_PROMPT),
        ])

    def _get_llm(self):
        if self.llm is None:
            if not self.api_key:
                raise ValueError("OPENAI_API_KEY not set. Add it to your .env file.")
            self.llm = ChatOpenAI(
                model=self.model,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                api_key=self.api_key
            )
        return self.llm

    def generate(self, post_data: str) -> str:
        """
        Turn formatted post text into a Markdown article.
        """
        try:
            chain = self.prompt | self._get_llm()
            result = chain.invoke({"post_data": post_data})
            return result.content
        except Exception as err:
            log_event("ERROR", "Error generating article with OpenAI", {"error": repr(err)})
            raise GenerationError() from err
