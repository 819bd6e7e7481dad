from user_api.main import serve

if __name__ == "__main__":
    serve()
