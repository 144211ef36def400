from webhook_server.mcp_server import main

main()
