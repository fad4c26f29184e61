"""namelint MCPサーバーのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import uvicorn

    from namelint.config import LinterConfig
    from namelint.logging_config import configure_logging
    from namelint.server import create_server

    config = LinterConfig()
    configure_logging(config.log_level, config.log_format)
    mcp = create_server(config)
    app = mcp.http_app(transport="streamable-http")
    uvicorn.run(app, host=config.host, port=config.port)
