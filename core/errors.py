class ArticleGeneratorError(Exception):
    """Base error. The message is safe to show to API callers."""


class LoadError(ArticleGeneratorError):
    def __init__(self, message: str = "Failed to read posts file"):
        super().__init__(message)


class GenerationError(ArticleGeneratorError):
    def __init__(self, message: str = "Failed to generate article"):
        super().__init__(message)


class PersistError(ArticleGeneratorError):
    def __init__(self, message: str = "Failed to write articles file"):
        super().__init__(message)
