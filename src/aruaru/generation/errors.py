class GenerationError(RuntimeError):
    """Base error for the generation pipeline.

    Every failure that reaches a caller is exactly one of the subclasses
    below. `message` is safe to show to an end user; provider details only
    go to the log.
    """

    kind = "unknown"
    status_code = 500
    default_message = "生成に失敗しました。しばらくしてから再試行してください。"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyTopicError(GenerationError):
    kind = "empty_topic"
    status_code = 400
    default_message = "お題を入力してください"


class QuotaExceededError(GenerationError):
    kind = "quota_exceeded"
    status_code = 429
    default_message = "APIの利用制限に達しました。しばらくしてからお試しください。"


class TransportError(GenerationError):
    kind = "transport"


class InsufficientOutputError(GenerationError):
    kind = "insufficient_output"
    default_message = (
        "十分なあるあるが生成されませんでした。別のお題でお試しください。"
    )


class UnknownGenerationError(GenerationError):
    kind = "unknown"
