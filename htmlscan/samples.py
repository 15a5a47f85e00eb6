"""Demo document for trying the scanner without input."""

DEMO_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta http-equiv="Content-Security-Policy" content="default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline';">
  <title>Secure Example Page</title>
</head>
<body>
  <header>
    <nav>
      <a href="#main">Skip to main content</a>
    </nav>
  </header>
  <main id="main">
    <h1>Welcome to Our Secure Website</h1>
    <p>This is a sample HTML document with security best practices.</p>
    <img src="image.jpg" alt="Secure image" loading="lazy">
    <form>
      <label for="email">Email Address</label>
      <input type="email" id="email" name="email" required>
      <button type="submit">Submit</button>
    </form>
    <a href="https://example.com" rel="noopener noreferrer" target="_blank">Visit Example</a>
  </main>
  <footer>
    <p>&copy; 2026 Example Company</p>
  </footer>
</body>
</html>"""
