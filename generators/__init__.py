from generators.base import GeneratedProblem, Generator, TopicGeneratorSet

__all__ = ["GeneratedProblem", "Generator", "TopicGeneratorSet"]
