import os

# Logging level for the CLI and loader (the compiler itself never logs)
LOG_LEVEL = os.environ.get("SHADER_NODES_LOG_LEVEL", "INFO").upper()

# Extensions accepted by io.load_graph
JSON_SUFFIXES = {'.json'}
YAML_SUFFIXES = {'.yaml', '.yml'}
GRAPH_FILE_SUFFIXES = JSON_SUFFIXES | YAML_SUFFIXES

# Header lines stamped at the top of every generated shader
SHADER_HEADER = (
    "// Custom Shader Node Graph",
    "// Generated by Shader Nodes",
)
