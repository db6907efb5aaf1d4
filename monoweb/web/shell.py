"""
Browser side of the app.

The page reads `_url` from its query string, downloads the page through
/api/download, restyles it through /api/transform and shows the result in a
sandboxed iframe. The frame has no allow-same-origin, so transformed pages
cannot reach the app's origin; links navigate the top window instead.
"""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Monoweb</title>
  <style>
    body { background: #fff; color: #000; font-family: Georgia, serif; margin: 1.5rem; }
    form { display: flex; gap: .5rem; margin-bottom: 1rem; }
    input { flex: 1; padding: .4rem; border: 1px solid #000; }
    button { border: 1px solid #000; background: #fff; padding: .4rem 1rem; }
    iframe { width: 100%; height: 80vh; border: 1px solid #ccc; }
  </style>
</head>
<body>
  <form method="get" action="/">
    <input name="_url" id="url" placeholder="example.com" autocomplete="off">
    <button type="submit">Go</button>
  </form>
  <p id="status"></p>
  <p id="warning"></p>
  <iframe id="page" title="Crawled Page Content" sandbox="allow-top-navigation-by-user-activation" hidden></iframe>
  <script>
    const statusEl = document.getElementById("status");
    const warningEl = document.getElementById("warning");
    const frame = document.getElementById("page");

    function show(html) {
      // Links are /?_url=... and must open in the top window
      frame.srcdoc = '<base target="_top">' + html;
      frame.hidden = false;
    }

    async function load(target) {
      statusEl.textContent = "Download Status: Downloading...";
      let download;
      try {
        const response = await fetch("/api/download?url=" + encodeURIComponent(target));
        download = await response.json();
        if (!response.ok) {
          statusEl.textContent = "Download Status: Error: " + (download.error || response.statusText);
          return;
        }
      } catch (err) {
        statusEl.textContent = "Download Status: Error: Failed to contact API.";
        return;
      }
      if (!download.content) {
        statusEl.textContent = "Download Status: Success: Received response but no content found.";
        return;
      }

      statusEl.textContent = "Download Status: Transforming...";
      try {
        const response = await fetch("/api/transform", {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: JSON.stringify({ htmlContent: download.content, originalUrl: target }),
        });
        const data = await response.json();
        if (!response.ok) {
          statusEl.textContent = "Download Status: Transform failed: " + (data.error || response.statusText);
          show(download.content);
          return;
        }
        if (data.warning) {
          warningEl.textContent = "Warning: " + data.warning;
        }
        statusEl.textContent = "Download Status: Success: Page loaded.";
        show(data.modifiedContent);
      } catch (err) {
        statusEl.textContent = "Download Status: Transform failed: Failed to contact API.";
        show(download.content);
      }
    }

    const target = new URLSearchParams(window.location.search).get("_url");
    if (target) {
      document.getElementById("url").value = target;
      load(target);
    }
  </script>
</body>
</html>
"""
