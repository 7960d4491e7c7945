#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Optional, Sequence

from langchain.agents import AgentExecutor, create_react_agent
from langchain.tools import Tool
from langchain_community.llms import LlamaCpp
from langchain_core.language_models import BaseLanguageModel
from langchain_core.prompts import PromptTemplate
from langchain_ollama import ChatOllama
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from tools import TOOL_DESCRIPTION, TOOL_NAME, UniversityLookup, university_search_run
from utils import AgentConfig, setup_logging


logger = logging.getLogger(__name__)

HISTORY_FILE = ".university_agent_history"
RULE = "=" * 80

REACT_PROMPT = """
You are an assistant that is responsible for helping the user find the best universities in the given location/country.

Instructions:
1. ALWAYS start by reasoning about what information you need
2. Use tools to gather specific information
3. Observe the results and reason about next steps
4. Continue until you have enough information for a comprehensive comparison
5. Provide a final recommendation based on your analysis

Available tools: {tools}
Tool names: {tool_names}

You must follow this process to come to conclusion:

Question: The original question that was asked to you.
Thought: Your thoughts about what you are doing.
Action: the action to take, should be one of [{tool_names}]
Action Input: the input to the action
Observation: the result of the action
... (this Thought/Action/Action Input/Observation can repeat N times)
Final Answer: the final answer to the original input question

Output format:
1) You must only include Final answer in your response
2) Must describe the count of total results
3) Must be in bullet points, arranged alphabetically.
4) Must include country name, university name, university website link.

Question: {input}
{agent_scratchpad}
"""

QUESTION_TEMPLATE = (
    "Find the best universities in {country}. I want to know about the top"
    " universities with their details including names, websites, and locations."
)


def _resolve_model_path(config: AgentConfig) -> str:
    # Prefer local symlink if present
    if os.path.islink("model.gguf") or os.path.isfile("model.gguf"):
        return os.path.abspath("model.gguf")
    return config.model_path


def build_llm(config: AgentConfig) -> BaseLanguageModel:
    if config.backend == "llamacpp":
        model_path = _resolve_model_path(config)
        if not os.path.isfile(model_path):
            raise FileNotFoundError(f"model not found: {model_path}")
        return LlamaCpp(
            model_path=model_path,
            n_ctx=config.n_ctx,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            verbose=False,
        )
    return ChatOllama(
        model=config.model,
        base_url=config.base_url,
        temperature=config.temperature,
    )


def build_tools(lookup: UniversityLookup) -> list[Tool]:
    university_tool = Tool(
        name=TOOL_NAME,
        func=lambda q: university_search_run(q, lookup=lookup),
        description=TOOL_DESCRIPTION,
    )
    return [university_tool]


def build_agent_executor(llm: BaseLanguageModel, tools: Sequence[Tool], config: AgentConfig) -> AgentExecutor:
    prompt = PromptTemplate.from_template(REACT_PROMPT)
    react_agent = create_react_agent(llm=llm, tools=tools, prompt=prompt)
    return AgentExecutor(
        agent=react_agent,
        tools=list(tools),
        verbose=config.verbose,
        max_iterations=config.max_iterations,
        handle_parsing_errors=True,
    )


class UniversityAgent:
    """ReAct agent answering "best universities in <country>" questions."""

    def __init__(self, executor: AgentExecutor, config: AgentConfig) -> None:
        self.executor = executor
        self.config = config

    @property
    def model_name(self) -> str:
        if self.config.backend == "llamacpp":
            return os.path.basename(self.config.model_path)
        return self.config.model

    def model_info(self) -> str:
        return f"{self.model_name} ReAct Agent (Reasoning & Acting)"

    def search_universities(self, country: str) -> str:
        question = QUESTION_TEMPLATE.format(country=country)
        try:
            result: Any = self.executor.invoke({"input": question})
        except Exception:
            logger.error("ReAct agent failed for %r", country, exc_info=True)
            return (
                f"I encountered an error while searching universities in {country}."
                f" Please make sure Ollama is running with the {self.model_name} model."
            )
        if isinstance(result, dict) and "output" in result:
            return str(result["output"])
        return str(result)


def build_university_agent(
    config: AgentConfig,
    lookup: Optional[UniversityLookup] = None,
    llm: Optional[BaseLanguageModel] = None,
) -> UniversityAgent:
    tools = build_tools(lookup or UniversityLookup())
    executor = build_agent_executor(llm or build_llm(config), tools, config)
    return UniversityAgent(executor, config)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="university-agent", description="ReAct university search agent on a local LLM")
    p.add_argument("-c", "--country", help="Search once for this country and exit")
    p.add_argument("--backend", choices=["ollama", "llamacpp"])
    p.add_argument("--model", help="Ollama model name")
    p.add_argument("--base-url", dest="base_url", help="Ollama server URL")
    p.add_argument("--model-path", dest="model_path", help="GGUF file for the llamacpp backend")
    p.add_argument("--max-iterations", dest="max_iterations", type=int)
    p.add_argument("--log-level", dest="log_level")
    p.add_argument("-q", "--quiet", action="store_true", help="Hide the agent's reasoning trace")
    return p


def _print_result(agent: UniversityAgent, country: str) -> None:
    print(f"\n[agent] Starting ReAct analysis for universities in: \"{country}\"")
    print("[agent] The agent will reason through the problem step by step...\n")
    print(RULE)
    result = agent.search_universities(country)
    print("\n" + RULE)
    print("UNIVERSITY SEARCH RESULTS:")
    print(RULE)
    print(result)
    print(RULE)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = AgentConfig.from_env().with_overrides(
            backend=args.backend,
            model=args.model,
            base_url=args.base_url,
            model_path=args.model_path,
            max_iterations=args.max_iterations,
            log_level=args.log_level,
            verbose=False if args.quiet else None,
        )
    except ValueError as e:
        print(f"[agent] bad configuration: {e}")
        return 2
    setup_logging(config.log_level)

    print("[agent] ReAct University Search Agent")
    print("[agent] Reasoning + Acting framework for university discovery\n")
    try:
        agent = build_university_agent(config)
    except Exception as e:
        print(f"[agent] failed to initialize: {type(e).__name__}: {e}")
        if config.backend == "ollama":
            print("[agent] Make sure Ollama is running: ollama serve")
            print(f"[agent] Make sure the model is available: ollama pull {config.model}")
        return 1
    print(f"[agent] Using: {agent.model_info()}\n")

    if args.country:
        country = args.country.strip()
        if not country:
            print("[agent] No country name provided. Exiting...")
            return 2
        _print_result(agent, country)
        return 0

    session = PromptSession(history=FileHistory(HISTORY_FILE))
    try:
        while True:
            try:
                country = session.prompt("Enter country name to search for universities: ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not country:
                print("[agent] No country name provided. Exiting...")
                break
            if country.lower() in {"exit", "quit", ":q"}:
                break
            _print_result(agent, country)
    finally:
        print("[agent] bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
