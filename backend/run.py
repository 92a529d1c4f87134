from rps import create_app, socketio

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    print(f"Rock-Paper-Scissors server running on http://localhost:{port}")
    socketio.run(app, host=app.config['HOST'], port=port, allow_unsafe_werkzeug=True)
