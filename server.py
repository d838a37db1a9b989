from html_rss.server import main

# Reads PORT / HOST from the environment (or a .env file) and serves /rss, /health and /.
if __name__ == "__main__":
    main()
