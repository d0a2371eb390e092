# express_mcp/__main__.py
from express_mcp.main import main

main()
