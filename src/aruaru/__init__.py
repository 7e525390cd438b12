"""aruaru: three off-the-wall "aruaru" observations for any topic.

    from aruaru.generation import GenerationPipeline, GenerationRequest
    from aruaru.llm import build_llm

    pipeline = GenerationPipeline(build_llm())
    result = pipeline.run(GenerationRequest(topic="コンビニ"))
"""

__version__ = "0.1.0"
