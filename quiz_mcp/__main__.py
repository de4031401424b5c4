from quiz_mcp.mcp_server.server import run

if __name__ == "__main__":
    run()
