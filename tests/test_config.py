import unittest


class TestAgentConfig(unittest.TestCase):
    def test_defaults(self):
        from utils.config import AgentConfig
        cfg = AgentConfig.from_env({})
        self.assertEqual(cfg.backend, "ollama")
        self.assertEqual(cfg.model, "deepseek-r1:1.5b")
        self.assertEqual(cfg.base_url, "http://localhost:11434")
        self.assertAlmostEqual(cfg.temperature, 0.1)
        self.assertEqual(cfg.max_iterations, 5)
        self.assertTrue(cfg.verbose)

    def test_from_env(self):
        from utils.config import AgentConfig
        cfg = AgentConfig.from_env({
            "UNI_AGENT_BACKEND": "LlamaCpp",
            "OLLAMA_MODEL": "qwen3:0.6b",
            "OLLAMA_BASE_URL": "http://gpu-box:11434/",
            "UNI_AGENT_TEMPERATURE": "0.5",
            "UNI_AGENT_MAX_ITERATIONS": "8",
            "UNI_AGENT_VERBOSE": "no",
            "UNI_AGENT_LOG_LEVEL": "debug",
            "LLAMA_N_CTX": "",
        })
        self.assertEqual(cfg.backend, "llamacpp")
        self.assertEqual(cfg.model, "qwen3:0.6b")
        self.assertEqual(cfg.base_url, "http://gpu-box:11434")
        self.assertAlmostEqual(cfg.temperature, 0.5)
        self.assertEqual(cfg.max_iterations, 8)
        self.assertFalse(cfg.verbose)
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertEqual(cfg.n_ctx, 4096)

    def test_invalid_values(self):
        from utils.config import AgentConfig
        with self.assertRaises(ValueError):
            AgentConfig(backend="openai")
        with self.assertRaises(ValueError):
            AgentConfig(max_iterations=0)
        with self.assertRaises(ValueError):
            AgentConfig.from_env({"UNI_AGENT_MAX_ITERATIONS": "many"})

    def test_with_overrides_skips_none(self):
        from utils.config import AgentConfig
        cfg = AgentConfig().with_overrides(model="llama3", base_url=None, verbose=False)
        self.assertEqual(cfg.model, "llama3")
        self.assertEqual(cfg.base_url, "http://localhost:11434")
        self.assertFalse(cfg.verbose)
        self.assertIs(AgentConfig().with_overrides(model=None).__class__, AgentConfig)


class TestSetupLogging(unittest.TestCase):
    def test_level_applied(self):
        import logging
        from utils.logging_utils import setup_logging
        root = logging.getLogger()
        old = root.level
        try:
            setup_logging("debug")
            self.assertEqual(root.level, logging.DEBUG)
            setup_logging("nonsense")
            self.assertEqual(root.level, logging.WARNING)
        finally:
            root.setLevel(old)


if __name__ == "__main__":
    unittest.main()
