from aruaru.llm import LLMMessage

SYSTEM_PROMPT = """あなたは「あるある」を考える専門家です。与えられたお題について、あるあるを3つ作ってください。

ルール：
- ちょうど3つ作ること
- 1つのあるあるは1〜2文、30〜60字程度
- 文末に必ず「〜しがち」または「〜がち」を入れる
- 場所・時刻・物などの具体的な名詞を1つ以上入れる
- 現実の出来事ではなく、現実離れした突拍子もない内容にする

出力形式：
3つの文字列からなるJSON配列だけを返してください。
["あるある1", "あるある2", "あるある3"]

説明や前置きは書かないでください。"""


def build_user_message(topic: str) -> str:
    return f"お題: {topic}"


def build_prompt(topic: str) -> list[LLMMessage]:
    return [
        LLMMessage(role="system", content=SYSTEM_PROMPT),
        LLMMessage(role="user", content=build_user_message(topic)),
    ]
